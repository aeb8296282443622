"""S3.01 — Dimension Extraction.

Count the validated glyphs into a typed value:
  line      → length = "-" on the row
  rectangle → width = "-" on the top edge, height = rows
  cuboid    → width = "-" on the top edge, length = diagonal rows,
              height = front face "|" rows

Runs only after a validator accepted the literal, so it cannot fail.
"""

from __future__ import annotations

from analogsight.engine.context import LiteralContext
from analogsight.engine.glyphs import FILL
from analogsight.engine.layer2.s2_03_cuboid_validation import count_diagonal_rows
from analogsight.engine.registry import Layer, stage
from analogsight.models.values import Cuboid, Line, Rectangle, ShapeKind


@stage(
    id="S3.01",
    layer=Layer.EXTRACTION,
    dependencies=["S2.01", "S2.02", "S2.03"],
    kinds={ShapeKind.LINE, ShapeKind.RECTANGLE, ShapeKind.CUBOID},
    description="Extract dimensions into a typed value",
)
def dimension_extraction(ctx: LiteralContext) -> None:
    lines = ctx.outline
    fill = sum(1 for g in ctx.grid.rows[lines[0].row] if g.char == FILL)

    if ctx.shape_kind is ShapeKind.LINE:
        ctx.value = Line(length=fill)
    elif ctx.shape_kind is ShapeKind.RECTANGLE:
        ctx.value = Rectangle(width=fill, height=len(lines))
    elif ctx.shape_kind is ShapeKind.CUBOID:
        depth = count_diagonal_rows(ctx)
        ctx.value = Cuboid(width=fill, height=len(lines) - depth - 3, length=depth)
