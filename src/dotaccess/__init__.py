"""dotaccess - Dot-path access to nested dicts and lists."""

from __future__ import annotations

# Accessor
from dotaccess.dot import Dot
from dotaccess.iterator import EntryCursor

# Path primitives
from dotaccess.paths import (
    SEPARATOR,
    add_value,
    clear_value,
    delete_value,
    get_value,
    has_value,
    set_value,
    split_path,
)

# Types and config
from dotaccess.types import DataRef
from dotaccess.config import ExportOptions

# Errors
from dotaccess.errors import DotError, ErrorCodes, InvalidPathError, SerializationError

__version__ = "0.1.0"

__all__ = [
    # Accessor
    "Dot",
    "EntryCursor",
    # Path primitives
    "SEPARATOR",
    "split_path",
    "get_value",
    "set_value",
    "add_value",
    "has_value",
    "delete_value",
    "clear_value",
    # Types and config
    "DataRef",
    "ExportOptions",
    # Errors
    "ErrorCodes",
    "DotError",
    "InvalidPathError",
    "SerializationError",
]
