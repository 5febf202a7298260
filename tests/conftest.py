"""Shared fixtures for the dotaccess test suite."""

from __future__ import annotations

from typing import Any

import pytest

from dotaccess import Dot


@pytest.fixture
def sample_data() -> dict[str, Any]:
    """A two-level structure with a scalar and a nested mapping."""
    return {"a": 1, "b": {"bc": 2}}


@pytest.fixture
def dot(sample_data: dict[str, Any]) -> Dot:
    """Accessor owning a copy of ``sample_data``."""
    return Dot(sample_data)


@pytest.fixture
def config_data() -> dict[str, Any]:
    """A config-like structure mixing mappings, lists and falsy values."""
    return {
        "db": {"host": "localhost", "port": 5432, "replicas": ["r1", "r2"]},
        "debug": False,
        "timeout": 0,
        "name": "",
        "extra": None,
    }
