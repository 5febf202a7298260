"""Error hierarchy for the dotaccess package."""

from __future__ import annotations

from typing import Any

__all__ = [
    "DotError",
    "InvalidPathError",
    "SerializationError",
    "ErrorCodes",
]


class DotError(Exception):
    """Base error for all dotaccess errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidPathError(DotError):
    """Raised when a path key is neither None, a string, nor a bulk container."""

    def __init__(self, path: Any, operation: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATH",
            message=f"Invalid path for {operation}(): {path!r} ({type(path).__name__})",
            details={"path": path, "operation": operation},
            **kwargs,
        )

    @property
    def path(self) -> Any:
        """The rejected path key."""
        return self.details["path"]

    @property
    def operation(self) -> str:
        """Name of the operation that rejected the path."""
        return self.details["operation"]


class SerializationError(DotError):
    """Raised by strict JSON export when the data cannot be encoded."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="SERIALIZATION_FAILED",
            message=f"Cannot serialize data to JSON: {reason}",
            details={"reason": reason},
            **kwargs,
        )


class ErrorCodes:
    """All dotaccess error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_PATH:
            handle_bad_key()
    """

    INVALID_PATH = "INVALID_PATH"
    SERIALIZATION_FAILED = "SERIALIZATION_FAILED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
