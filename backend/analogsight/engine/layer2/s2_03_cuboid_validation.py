"""S2.03 — Cuboid Validation.

         +----------+      top edge (width W)
        /          /|      D top-face rows, both diagonals stepping left
       /          / |
      /          /  +      back edge: "|" for H rows, then "+"
     /          /  /
    +----------+  /        front face: a W-wide rectangle with H "|" rows,
    |          | /         starting D + 1 columns left of the top edge
    |          |/          side diagonal: D steps down to the front face
    +----------+

Rows are checked top to bottom. The top-face rows are walked before the
front face is required to exist, so a broken diagonal is reported ahead of
a missing front face. Front face edges keep the rectangle error kinds;
any diagonal, back-edge or front-face offset disagreement is
``MismatchedDepth``.
"""

from __future__ import annotations

from analogsight.engine.context import LiteralContext
from analogsight.engine.edges import (
    check_border,
    check_gap,
    check_glyph,
    check_lead,
    check_tail,
    measure_border,
)
from analogsight.engine.errors import ErrorKind
from analogsight.engine.glyphs import BORDER, CORNER, DIAGONAL
from analogsight.engine.registry import Layer, stage
from analogsight.models.values import ShapeKind


@stage(
    id="S2.03",
    layer=Layer.VALIDATION,
    dependencies=["S1.01"],
    kinds={ShapeKind.CUBOID},
    description="Check cuboid faces, diagonals and back edge agree",
)
def cuboid_validation(ctx: LiteralContext) -> None:
    lines = ctx.outline
    top = lines[0]

    c0 = top.first
    c1 = measure_border(ctx, top)
    check_tail(ctx, top, c1, ErrorKind.MISMATCHED_WIDTH)
    width = c1 - c0 - 1

    depth = count_diagonal_rows(ctx)
    front = depth + 1
    height = len(lines) - depth - 3

    for i in range(1, front):
        line = lines[i]
        check_lead(ctx, line, c0 - i, DIAGONAL, ErrorKind.MISMATCHED_DEPTH)
        check_glyph(ctx, line.row, c1 - i, DIAGONAL, ErrorKind.MISMATCHED_DEPTH)
        if height >= 1:
            _check_side(ctx, i, c1 - i, c1, height)

    if front >= len(lines):
        last = lines[-1]
        raise ctx.error_at(
            ErrorKind.MISMATCHED_DEPTH, last.row, last.first, "top face is not followed by a front face"
        )
    if height < 1:
        line = lines[front]
        raise ctx.error_at(
            ErrorKind.MISMATCHED_HEIGHT, line.row, line.first, "front face has no '|' rows"
        )

    f0 = c0 - front
    f1 = f0 + width + 1

    line = lines[front]
    check_lead(ctx, line, f0, CORNER, ErrorKind.MISMATCHED_DEPTH)
    check_border(ctx, line, f0, width)
    _check_side(ctx, front, f1, c1, height)

    for i in range(front + 1, len(lines) - 1):
        line = lines[i]
        check_lead(ctx, line, f0, BORDER, ErrorKind.MISMATCHED_HEIGHT)
        check_glyph(ctx, line.row, f1, BORDER, ErrorKind.MISMATCHED_HEIGHT)
        _check_side(ctx, i, f1, c1, height)

    bottom = lines[-1]
    check_lead(ctx, bottom, f0, CORNER, ErrorKind.MISMATCHED_WIDTH)
    check_border(ctx, bottom, f0, width)
    check_tail(ctx, bottom, f1, ErrorKind.MISMATCHED_WIDTH)


def count_diagonal_rows(ctx: LiteralContext) -> int:
    """Number of consecutive rows after the top edge led by a diagonal."""
    depth = 0
    for line in ctx.outline[1:]:
        if line.is_blank or ctx.grid.char_at(line.row, line.first) != DIAGONAL:
            break
        depth += 1
    return depth


def side_position(index: int, back: int, height: int) -> tuple[int, str]:
    """Column and glyph of the side face on the row ``index`` rows below the top edge."""
    if index <= height:
        return back, BORDER
    if index == height + 1:
        return back, CORNER
    return back - (index - height - 1), DIAGONAL


def _check_side(ctx: LiteralContext, index: int, edge: int, back: int, height: int) -> None:
    """Right of the face edge at ``edge``: blanks, the side glyph, then nothing."""
    line = ctx.outline[index]
    column, glyph = side_position(index, back, height)
    check_gap(ctx, line.row, edge + 1, column, ErrorKind.MISMATCHED_DEPTH)
    check_glyph(ctx, line.row, column, glyph, ErrorKind.MISMATCHED_DEPTH)
    check_tail(ctx, line, column, ErrorKind.MISMATCHED_DEPTH)
