"""Shared pytest fixtures for dynui tests."""

from datetime import datetime
from typing import Any

import pytest

from dynui import Engine, reset_default_engine

# Friday afternoon
FIXED_NOW = datetime(2024, 3, 15, 14, 30)


@pytest.fixture
def now() -> datetime:
    """Return the fixed reference time used by time formats."""
    return FIXED_NOW


@pytest.fixture
def variable_map() -> dict[str, Any]:
    """Return a populated variable registry."""
    return {
        "@state": {
            "greeting": "Hello",
            "name": "World",
            "count": "42",
            "user": {"profile": {"name": "Ada", "age": 36}},
            "items": [{"label": "first"}, {"label": "second"}],
            "flags": {"off": 0},
            "createdAt": "2024-03-15T09:05:00",
        },
        "@props": {"id": "abc", "lookup": "profile"},
        "@variables": {"messages": {"a": {"b": 7}}},
        "@env": {"api": "https://example.com"},
    }


@pytest.fixture
def style_map() -> dict[str, Any]:
    """Return a populated style registry."""
    return {
        "colors": {"primary": "#0066cc", "text": {"muted": "#888888"}},
        "dimensions": {"gutter": 16},
    }


@pytest.fixture
def engine(variable_map: dict[str, Any], style_map: dict[str, Any], now: datetime) -> Engine:
    """Return an engine with variables and styles installed and a fixed clock."""
    engine = Engine(clock=lambda: now)
    engine.setup(variables=variable_map, styles=style_map)
    return engine


@pytest.fixture(autouse=True)
def fresh_default_engine():
    """Isolate the process-wide engine between tests."""
    reset_default_engine()
    yield
    reset_default_engine()
