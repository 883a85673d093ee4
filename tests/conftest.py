"""Shared pytest fixtures for enumkit tests."""

import pytest

from enumkit.core import (
    init_enum,
    init_number_enum,
    init_object_enum,
    init_string_enum,
)


@pytest.fixture(autouse=True)
def _no_strict_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ENUMKIT_STRICT from the outer environment out of tests."""
    monkeypatch.delenv("ENUMKIT_STRICT", raising=False)


@pytest.fixture
def color_enum():
    """Return a value enum over RGB integers."""
    return init_enum("Color", ["RED", "GREEN", "BLUE"], [0xFF0000, 0x00FF00, 0x0000FF])


@pytest.fixture
def direction_enum():
    """Return a string enum."""
    return init_string_enum("Direction", ["NORTH", "EAST", "SOUTH", "WEST"])


@pytest.fixture
def level_enum():
    """Return a number enum starting at 1."""
    return init_number_enum("Level", ["LOW", "MID", "HIGH", "MAX"], 1)


@pytest.fixture
def shape_enum():
    """Return a sealed object enum whose values are its names."""
    return init_object_enum("Shape", True, ["POINT", "LINE", "PLANE"])
