"""Tests for JSON export and ExportOptions."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
from pydantic import ValidationError

from dotaccess import Dot, ExportOptions
from dotaccess.errors import ErrorCodes, SerializationError


class TestToJson:
    """to_json pretty-prints and keeps non-ASCII text literal."""

    def test_default_indent_is_four_spaces(self) -> None:
        assert Dot({"a": 1}).to_json() == '{\n    "a": 1\n}'

    def test_unicode_written_literally(self) -> None:
        text = Dot({"name": "Ünïcødé 日本"}).to_json()
        assert text is not None
        assert "日本" in text
        assert "\\u" not in text

    def test_output_parses_back(self, config_data: dict[str, Any]) -> None:
        text = Dot(config_data).to_json()
        assert text is not None
        assert json.loads(text) == config_data

    def test_per_call_options(self) -> None:
        dot = Dot({"b": 1, "a": "é"})
        text = dot.to_json(ExportOptions(indent=2, ensure_ascii=True, sort_keys=True))
        assert text == '{\n  "a": "\\u00e9",\n  "b": 1\n}'

    def test_accessor_options(self) -> None:
        dot = Dot({"a": 1}, export_options=ExportOptions(indent=0))
        assert dot.to_json() == '{\n"a": 1\n}'

    def test_as_object_inherits_options(self) -> None:
        dot = Dot({"sub": {"a": 1}}, export_options=ExportOptions(indent=1))
        assert dot.get("sub", as_object=True).to_json() == '{\n "a": 1\n}'

    def test_str_matches_to_json(self, sample_data: dict[str, Any]) -> None:
        dot = Dot(sample_data)
        assert str(dot) == dot.to_json()


class TestToJsonFailure:
    """Unencodable data yields a sentinel, or an error in strict mode."""

    def test_returns_none_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        dot = Dot({"x": object()})
        with caplog.at_level(logging.WARNING, logger="dotaccess.dot"):
            assert dot.to_json() is None
        assert "JSON export failed" in caplog.text

    def test_str_of_unencodable_is_empty(self) -> None:
        assert str(Dot({"x": {1, 2}})) == ""

    def test_circular_reference(self) -> None:
        data: dict[str, Any] = {}
        data["self"] = data
        assert Dot(data, by_ref=True).to_json() is None

    def test_nan_and_infinity_rejected(self) -> None:
        """NaN and Infinity are not JSON, so export fails instead of emitting them."""
        dot = Dot({"x": float("nan"), "y": float("inf")})
        assert dot.to_json() is None
        assert str(Dot({"z": float("-inf")})) == ""
        with pytest.raises(SerializationError) as exc_info:
            dot.to_json(strict=True)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_too_deep_nesting(self, caplog: pytest.LogCaptureFixture) -> None:
        data: dict[str, Any] = {}
        node = data
        for _ in range(10000):
            node["n"] = {}
            node = node["n"]
        dot = Dot(data, by_ref=True)
        with caplog.at_level(logging.WARNING, logger="dotaccess.dot"):
            assert dot.to_json() is None
        assert "JSON export failed" in caplog.text
        with pytest.raises(SerializationError) as exc_info:
            dot.to_json(strict=True)
        assert isinstance(exc_info.value.cause, RecursionError)

    def test_strict_raises(self) -> None:
        dot = Dot({"x": object()})
        with pytest.raises(SerializationError) as exc_info:
            dot.to_json(strict=True)
        assert exc_info.value.code == ErrorCodes.SERIALIZATION_FAILED
        assert isinstance(exc_info.value.cause, TypeError)


class TestExportOptions:
    """ExportOptions validation."""

    def test_defaults(self) -> None:
        options = ExportOptions()
        assert options.indent == 4
        assert options.ensure_ascii is False
        assert options.sort_keys is False

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExportOptions(indent=-1)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExportOptions(width=80)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        options = ExportOptions()
        with pytest.raises(ValidationError):
            options.indent = 2  # type: ignore[misc]
