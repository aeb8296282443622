"""S0.01 — Outline Extraction.

Record, for every row between the first and the last non-blank row, where
its glyphs start and end. Leading indentation and blank lines around the
drawing are layout (a literal embedded in a triple-quoted string starts and
ends with them); blank rows inside the drawing are kept so the validators
can reject them.

No validation happens here.
"""

from __future__ import annotations

from analogsight.engine.context import LiteralContext, RowOutline
from analogsight.engine.glyphs import is_blank
from analogsight.engine.registry import Layer, stage


@stage(
    id="S0.01",
    layer=Layer.LOADING,
    description="Record the non-blank span of every significant row",
)
def outline_extraction(ctx: LiteralContext) -> None:
    outline: list[RowOutline] = []

    for row_idx, glyphs in enumerate(ctx.grid.rows):
        marks = [g.column for g in glyphs if not is_blank(g.char)]
        if marks:
            outline.append(RowOutline(row=row_idx, first=marks[0], last=marks[-1]))
        else:
            outline.append(RowOutline(row=row_idx, first=None, last=None))

    # Trim blank rows around the drawing
    while outline and outline[0].is_blank:
        outline.pop(0)
    while outline and outline[-1].is_blank:
        outline.pop()

    ctx.outline = outline
