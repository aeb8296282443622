"""S2.02 — Rectangle Validation.

  +------+   top edge: measured, defines the left/right edge columns
  | note |   interior rows: "|" at both edge columns, free-form between
  +------+   bottom edge: same columns, same fill length as the top

Horizontal edge problems are ``MismatchedWidth``; vertical edge problems
are ``MismatchedHeight``.
"""

from __future__ import annotations

from analogsight.engine.context import LiteralContext
from analogsight.engine.edges import check_border, check_glyph, check_lead, check_tail, measure_border
from analogsight.engine.errors import ErrorKind
from analogsight.engine.glyphs import BORDER, CORNER
from analogsight.engine.registry import Layer, stage
from analogsight.models.values import ShapeKind


@stage(
    id="S2.02",
    layer=Layer.VALIDATION,
    dependencies=["S1.01"],
    kinds={ShapeKind.RECTANGLE},
    description="Check rectangle edges line up",
)
def rectangle_validation(ctx: LiteralContext) -> None:
    lines = ctx.outline
    top, bottom = lines[0], lines[-1]

    left = top.first
    right = measure_border(ctx, top)
    check_tail(ctx, top, right, ErrorKind.MISMATCHED_WIDTH)
    width = right - left - 1

    for line in lines[1:-1]:
        check_lead(ctx, line, left, BORDER, ErrorKind.MISMATCHED_HEIGHT)
        check_glyph(ctx, line.row, right, BORDER, ErrorKind.MISMATCHED_HEIGHT)
        check_tail(ctx, line, right, ErrorKind.MISMATCHED_HEIGHT)

    check_lead(ctx, bottom, left, CORNER, ErrorKind.MISMATCHED_WIDTH)
    check_border(ctx, bottom, left, width)
    check_tail(ctx, bottom, right, ErrorKind.MISMATCHED_WIDTH)
