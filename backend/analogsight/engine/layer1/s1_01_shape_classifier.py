"""S1.01 — Shape Classification.

Decide which shape the author is drawing from the first glyphs of the
first two significant rows. First match wins:
  IF one row AND it starts with "+" or "I"               → line
  IF ≥2 rows AND row 0 starts with "+" AND row 1 "/"      → cuboid
  IF ≥2 rows AND row 0 starts with "+" AND row 1 "|" or "+" → rectangle
  ELSE                                                   → unknown (fatal)

Only structural cues are read here. A malformed edge still classifies; the
validator for that kind reports it with the precise rule that was broken.
"""

from __future__ import annotations

from analogsight.engine.context import LiteralContext
from analogsight.engine.errors import ErrorKind
from analogsight.engine.glyphs import BORDER, CORNER, DIAGONAL, LINE_TERMINATORS
from analogsight.engine.registry import Layer, stage
from analogsight.models.values import ShapeKind


@stage(
    id="S1.01",
    layer=Layer.CLASSIFICATION,
    dependencies=["S0.01"],
    description="Classify the literal as line, rectangle or cuboid",
)
def shape_classification(ctx: LiteralContext) -> None:
    ctx.shape_kind = classify(ctx)

    if ctx.shape_kind is ShapeKind.UNKNOWN:
        glyph = ctx.first_glyph()
        if glyph is None:
            raise ctx.error_at(ErrorKind.UNCLASSIFIABLE, 0, 0, "literal is empty")
        raise ctx.error_at(
            ErrorKind.UNCLASSIFIABLE,
            glyph.row,
            glyph.column,
            f"{glyph.char!r} does not start a line, rectangle or cuboid",
        )


def classify(ctx: LiteralContext) -> ShapeKind:
    leads = [
        ctx.grid.char_at(line.row, line.first) if not line.is_blank else ""
        for line in ctx.outline[:2]
    ]

    if not leads:
        return ShapeKind.UNKNOWN

    if len(ctx.outline) == 1:
        return ShapeKind.LINE if leads[0] in LINE_TERMINATORS else ShapeKind.UNKNOWN

    if leads[0] != CORNER:
        return ShapeKind.UNKNOWN
    if leads[1] == DIAGONAL:
        return ShapeKind.CUBOID
    if leads[1] in (BORDER, CORNER):
        return ShapeKind.RECTANGLE
    return ShapeKind.UNKNOWN
