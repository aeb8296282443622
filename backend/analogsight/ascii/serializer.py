"""Write the canonical analog literal drawing of a value.

Evaluating the drawing returned here gives back an equal value.
"""

from __future__ import annotations

from analogsight.engine.glyphs import BORDER, CORNER, DIAGONAL, FILL
from analogsight.engine.layer2.s2_03_cuboid_validation import side_position
from analogsight.models.values import AnalogValue, Cuboid, Line, Rectangle


def render_literal(value: AnalogValue) -> str:
    """Draw a Line, Rectangle or Cuboid as ASCII art."""
    if isinstance(value, Line):
        return _edge(value.length)
    if isinstance(value, Rectangle):
        return _render_rectangle(value)
    if isinstance(value, Cuboid):
        return _render_cuboid(value)
    raise TypeError(f"Cannot render {type(value).__name__}")


def _edge(width: int) -> str:
    return CORNER + FILL * width + CORNER


def _render_rectangle(rect: Rectangle) -> str:
    if rect.height < 2:
        raise ValueError("A rectangle drawing needs at least its two edge rows")
    middle = BORDER + " " * rect.width + BORDER
    lines = [_edge(rect.width)] + [middle] * (rect.height - 2) + [_edge(rect.width)]
    return "\n".join(lines)


def _render_cuboid(cuboid: Cuboid) -> str:
    width, height, depth = cuboid.width, cuboid.height, cuboid.length
    back = depth + width + 2
    num_rows = depth + height + 3
    canvas = [[" "] * (back + 1) for _ in range(num_rows)]

    def put(row: int, column: int, text: str) -> None:
        canvas[row][column:column + len(text)] = list(text)

    put(0, depth + 1, _edge(width))
    for i in range(1, depth + 1):
        put(i, depth + 1 - i, DIAGONAL)
        put(i, back - i, DIAGONAL)

    front = depth + 1
    put(front, 0, _edge(width))
    for i in range(front + 1, num_rows - 1):
        put(i, 0, BORDER)
        put(i, width + 1, BORDER)
    put(num_rows - 1, 0, _edge(width))

    for i in range(1, depth + height + 2):
        column, glyph = side_position(i, back, height)
        put(i, column, glyph)

    return "\n".join("".join(row).rstrip() for row in canvas)
