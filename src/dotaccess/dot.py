"""Dot: path-based accessor over a nested mapping."""

from __future__ import annotations

import json
import logging
from collections.abc import ItemsView, Iterable, Iterator, KeysView, Mapping, MutableMapping, ValuesView
from typing import Any

from dotaccess.config import ExportOptions
from dotaccess.errors import SerializationError
from dotaccess.iterator import EntryCursor
from dotaccess.paths import add_value, clear_value, delete_value, get_value, has_value, set_value
from dotaccess.types import DataRef

__all__ = ["Dot"]

logger = logging.getLogger(__name__)


class Dot:
    """Accessor for nested dicts addressed by dot paths such as ``"a.b.c"``.

    The backing mapping lives in a :class:`DataRef` cell. By default the
    accessor owns a shallow copy of the data it is given; with
    ``by_ref=True`` (or when handed a ``DataRef``) it shares the caller's
    mapping, so changes on either side are visible on the other.

    Example:
        dot = Dot({"db": {"host": "localhost"}})
        dot.set("db.port", 5432).add("db.replicas", "r1")
        dot.get("db.port")          # 5432
        dot["db.host"]              # "localhost"
        "db.user" in dot            # False
    """

    def __init__(
        self,
        data: Mapping[str, Any] | DataRef | None = None,
        *,
        by_ref: bool = False,
        export_options: ExportOptions | None = None,
    ) -> None:
        self._ref = DataRef()
        self._export_options = export_options or ExportOptions()
        if isinstance(data, DataRef) or (by_ref and data is not None):
            self.set_data_as_ref(data)  # type: ignore[arg-type]
        elif data is not None:
            self.set_data(data)

    # -- Backing data --

    @property
    def ref(self) -> DataRef:
        """The cell holding the backing mapping; pass it to another Dot to share it."""
        return self._ref

    @property
    def data(self) -> dict[str, Any]:
        """The backing mapping itself."""
        return self._ref.value

    def set_data(self, data: Mapping[str, Any]) -> None:
        """Replace the backing mapping with a private shallow copy of ``data``."""
        self._ref = DataRef(dict(data))

    def set_data_as_ref(self, data: MutableMapping[str, Any] | DataRef) -> None:
        """Use ``data`` (a dict or a shared cell) as the backing mapping without copying."""
        self._ref = data if isinstance(data, DataRef) else DataRef(data)  # type: ignore[arg-type]

    # -- Path operations --

    def get(self, path: str | None = None, default: Any = None, as_object: bool = False) -> Any:
        """Get the value at ``path``, or ``default`` when it does not resolve.

        With ``as_object=True`` a mapping result is returned as a new Dot
        over a shallow copy of it, detached from this one.
        """
        value = get_value(self._ref.value, path, default)
        if as_object and isinstance(value, Mapping):
            return type(self)(value, export_options=self._export_options)
        return value

    def set(self, path: str | Mapping[str, Any], value: Any = None) -> Dot:
        """Set a value at ``path``, or every pair of a ``{path: value}`` mapping."""
        set_value(self._ref.value, path, value)
        return self

    def add(self, path: str | Mapping[str, Any], value: Any = None, pop: bool = False) -> Dot:
        """Append ``value`` to the sequence at ``path``."""
        add_value(self._ref.value, path, value, pop)
        return self

    def has(self, path: str) -> bool:
        return has_value(self._ref.value, path)

    def delete(self, path: str | Iterable[str]) -> Dot:
        """Remove ``path`` or each of several paths; missing paths are ignored."""
        delete_value(self._ref.value, path)
        return self

    def clear(self, path: str | Iterable[str] | None = None, format: bool = False) -> Dot:
        """Empty the whole structure, or reset the container at ``path`` to ``{}``.

        Without ``format`` a path that does not already lead to a container
        is left alone; with it, the path is created.
        """
        clear_value(self._ref.value, path, format)
        return self

    def plus(self, path: str, amount: int | float = 1) -> int | float:
        """Add ``amount`` to the number at ``path`` (absent counts as 0) and return the result."""
        value = self.get(path, 0) + amount
        self.set(path, value)
        return value

    def minus(self, path: str, amount: int | float = 1) -> int | float:
        """Subtract ``amount`` from the number at ``path`` and return the result."""
        return self.plus(path, -amount)

    # -- Whole structure --

    def is_empty(self) -> bool:
        return not self._ref.value

    def count(self) -> int:
        return len(self._ref.value)

    def to_dict(self) -> dict[str, Any]:
        """Return the backing mapping (not a copy)."""
        return self._ref.value

    to_array = to_dict

    def to_json(self, options: ExportOptions | None = None, *, strict: bool = False) -> str | None:
        """Serialize the backing mapping to JSON.

        Args:
            options: Overrides the accessor's export options for this call.
            strict: Raise instead of returning None on failure.

        Returns:
            The JSON text, or None if the data cannot be encoded.

        Raises:
            SerializationError: If encoding fails and ``strict`` is set.
        """
        options = options or self._export_options
        try:
            return json.dumps(
                self._ref.value,
                indent=options.indent,
                ensure_ascii=options.ensure_ascii,
                sort_keys=options.sort_keys,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            if strict:
                raise SerializationError(str(exc), cause=exc) from exc
            logger.warning(f"JSON export failed: {exc}")
            return None

    def cursor(self) -> EntryCursor:
        """Return a pausable cursor over the root entries."""
        return EntryCursor(self._ref)

    def keys(self) -> KeysView[str]:
        return self._ref.value.keys()

    def values(self) -> ValuesView[Any]:
        return self._ref.value.values()

    def items(self) -> ItemsView[str, Any]:
        return self._ref.value.items()

    # -- Protocols --

    def __iter__(self) -> Iterator[str]:
        return iter(self._ref.value)

    def __len__(self) -> int:
        return len(self._ref.value)

    def __getitem__(self, path: str) -> Any:
        return self.get(path)

    def __setitem__(self, path: str, value: Any) -> None:
        self.set(path, value)

    def __delitem__(self, path: str) -> None:
        self.delete(path)

    def __contains__(self, path: object) -> bool:
        return self.has(path)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dot):
            return self._ref.value == other._ref.value
        if isinstance(other, Mapping):
            return self._ref.value == other
        return NotImplemented

    def __str__(self) -> str:
        return self.to_json() or ""

    def __repr__(self) -> str:
        return f"Dot({self._ref.value!r})"
