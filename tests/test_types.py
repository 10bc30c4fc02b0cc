"""Tests for type definitions."""

import pytest

from dmenu_facade.types import Color, Position, Selection


class TestPosition:
    def test_values(self):
        assert Position.TOP.value == "top"
        assert Position.BOTTOM.value == "bottom"

    def test_str(self):
        assert str(Position.BOTTOM) == "bottom"

    def test_from_string(self):
        assert Position.from_string("top") == Position.TOP
        assert Position.from_string(" BOTTOM ") == Position.BOTTOM

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            Position.from_string("middle")


class TestColor:
    def test_str_is_raw_value(self):
        assert str(Color("#ff0000")) == "#ff0000"

    def test_equality(self):
        assert Color("red") == Color("red")
        assert Color("red") != Color("blue")


def test_selection_fields():
    sel = Selection(item={"id": 1}, index=1, text="World")
    assert sel.item == {"id": 1}
    assert sel.index == 1
    assert sel.text == "World"
