"""Shared types: the DataRef cell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["DataRef"]


@dataclass
class DataRef:
    """Mutable cell holding a backing mapping.

    Accessors built over the same cell share both the mapping and any
    replacement of it.

    Attributes:
        value: The root mapping.
    """

    value: dict[str, Any] = field(default_factory=dict)
