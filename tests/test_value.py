import importlib

import pytest

from bencoding import config
from bencoding.value import INT64_MAX, INT64_MIN, kind_of


@pytest.mark.parametrize(
    "value,expected",
    [
        (b"spam", "string"),
        (3, "integer"),
        ([b"a"], "list"),
        ({b"a": 1}, "dictionary"),
    ],
)
def test_kind_of(value, expected):
    """Parametrized test for naming each variant."""
    assert kind_of(value) == expected


@pytest.mark.parametrize("value", ["spam", True, 1.5, None, (1, 2)])
def test_kind_of_rejects_other_types(value):
    """Test that values outside the union are rejected."""
    with pytest.raises(TypeError):
        kind_of(value)


def test_int64_bounds():
    assert INT64_MAX == 9223372036854775807
    assert INT64_MIN == -INT64_MAX - 1


def test_zero_max_depth_disables_limit(monkeypatch):
    """Test that BENCODING_MAX_DEPTH=0 turns the nesting limit off."""
    monkeypatch.setenv("BENCODING_MAX_DEPTH", "0")
    try:
        assert importlib.reload(config).MAX_DEPTH is None
    finally:
        monkeypatch.undo()
        importlib.reload(config)
