"""Typed values produced by evaluating an analog literal."""

from __future__ import annotations

import enum
import functools

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ShapeKind(str, enum.Enum):
    LINE = "line"
    RECTANGLE = "rectangle"
    CUBOID = "cuboid"
    UNKNOWN = "unknown"


@functools.total_ordering
class Line(BaseModel):
    """A 1D line: counts how many ``-`` long the literal is.

    Lines behave like the integer they measure: they add, compare and can be
    used anywhere an index is expected (``[0] * line``, ``range(line)``).
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(..., ge=1)

    def __add__(self, other: Line) -> Line:
        if not isinstance(other, Line):
            return NotImplemented
        return Line(length=self.length + other.length)

    def __lt__(self, other: Line) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.length < other.length

    def __int__(self) -> int:
        return self.length

    def __index__(self) -> int:
        return self.length


class Rectangle(BaseModel):
    """A 2D rectangle.

    ``width`` counts the ``-`` of a horizontal edge; ``height`` counts every
    row of the drawing, both borders included. A height of 1 has no drawing
    (a single row reads as a line) but is kept as a value, since cuboid face
    projections can be one unit tall.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)

    @computed_field
    @property
    def area(self) -> int:
        return self.width * self.height


class Cuboid(BaseModel):
    """A 3D cuboid.

    ``width`` counts the ``-`` of the top edge, ``length`` the ``/`` steps of
    the receding edges and ``height`` the ``|`` rows of the front face.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    length: int = Field(..., ge=1)

    @computed_field
    @property
    def volume(self) -> int:
        return self.width * self.height * self.length

    def top(self) -> Rectangle:
        """Top face: width by length."""
        return Rectangle(width=self.width, height=self.length)

    def side(self) -> Rectangle:
        """Side face: length by height."""
        return Rectangle(width=self.length, height=self.height)

    def front(self) -> Rectangle:
        """Front face: width by height."""
        return Rectangle(width=self.width, height=self.height)


AnalogValue = Line | Rectangle | Cuboid


def shape_kind_of(value: AnalogValue) -> ShapeKind:
    if isinstance(value, Line):
        return ShapeKind.LINE
    if isinstance(value, Rectangle):
        return ShapeKind.RECTANGLE
    if isinstance(value, Cuboid):
        return ShapeKind.CUBOID
    raise TypeError(f"Not an analog value: {value!r}")
