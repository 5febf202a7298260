"""Export configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ExportOptions"]


class ExportOptions(BaseModel):
    """Settings for JSON export of a backing structure.

    The defaults give pretty-printed output with non-ASCII characters
    written literally.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: int = Field(default=4, ge=0)
    ensure_ascii: bool = False
    sort_keys: bool = False
