"""Tests for the typed analog values."""

import pytest
from pydantic import ValidationError

from analogsight.models.values import Cuboid, Line, Rectangle, ShapeKind, shape_kind_of


def test_dimensions_must_be_positive():
    with pytest.raises(ValidationError):
        Line(length=0)
    with pytest.raises(ValidationError):
        Rectangle(width=3, height=0)
    with pytest.raises(ValidationError):
        Cuboid(width=1, height=1, length=-2)


def test_values_are_immutable():
    line = Line(length=3)
    with pytest.raises(ValidationError):
        line.length = 4


def test_line_ordering():
    assert Line(length=2) < Line(length=5)
    assert Line(length=5) >= Line(length=5)
    assert max(Line(length=1), Line(length=7), Line(length=3)) == Line(length=7)


def test_line_as_integer():
    line = Line(length=3)
    assert int(line) == 3
    assert [0] * line == [0, 0, 0]
    assert list(range(line)) == [0, 1, 2]


def test_line_adds_only_lines():
    with pytest.raises(TypeError):
        Line(length=1) + 1


def test_derived_quantities_are_dumped():
    assert Rectangle(width=4, height=3).model_dump() == {"width": 4, "height": 3, "area": 12}
    assert Cuboid(width=2, height=3, length=4).model_dump()["volume"] == 24


def test_shape_kind_of():
    assert shape_kind_of(Line(length=1)) is ShapeKind.LINE
    assert shape_kind_of(Rectangle(width=1, height=2)) is ShapeKind.RECTANGLE
    assert shape_kind_of(Cuboid(width=1, height=1, length=1)) is ShapeKind.CUBOID
    with pytest.raises(TypeError):
        shape_kind_of(3)


def test_one_row_rectangle_is_a_value_without_a_drawing():
    # The mining rig's front face is one unit tall
    front = Cuboid(width=21, height=1, length=16).front()
    assert front == Rectangle(width=21, height=1)
    assert front.area == 21
