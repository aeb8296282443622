"""S2.01 — Line Validation.

A line is ``T-…-T`` on a single row: two identical terminators (``+`` or
``I``) around at least one ``-``, and nothing after the closing terminator.
Every violation is ``MalformedLine``.
"""

from __future__ import annotations

from analogsight.engine.context import LiteralContext
from analogsight.engine.errors import ErrorKind
from analogsight.engine.glyphs import FILL, LINE_TERMINATORS, is_blank
from analogsight.engine.registry import Layer, stage
from analogsight.models.values import ShapeKind


@stage(
    id="S2.01",
    layer=Layer.VALIDATION,
    dependencies=["S1.01"],
    kinds={ShapeKind.LINE},
    description="Check line terminators and fill",
)
def line_validation(ctx: LiteralContext) -> None:
    line = ctx.outline[0]
    row, start = line.row, line.first
    terminator = ctx.grid.char_at(row, start)

    column = start + 1
    while ctx.grid.char_at(row, column) == FILL:
        column += 1

    closing = ctx.grid.char_at(row, column)
    if closing == "" or is_blank(closing):
        raise ctx.error_at(
            ErrorKind.MALFORMED_LINE, row, column, f"line ends without a closing {terminator!r}"
        )
    if closing in LINE_TERMINATORS and closing != terminator:
        raise ctx.error_at(
            ErrorKind.MALFORMED_LINE,
            row,
            column,
            f"line opens with {terminator!r} but closes with {closing!r}",
        )
    if closing != terminator:
        raise ctx.error_at(ErrorKind.MALFORMED_LINE, row, column, f"unexpected {closing!r} in line")
    if column == start + 1:
        raise ctx.error_at(ErrorKind.MALFORMED_LINE, row, column, "line has no '-' fill")

    if line.last > column:
        for stray in range(column + 1, line.last + 1):
            if not is_blank(ctx.grid.char_at(row, stray)):
                raise ctx.error_at(
                    ErrorKind.MALFORMED_LINE,
                    row,
                    stray,
                    f"unexpected {ctx.grid.char_at(row, stray)!r} after the closing terminator",
                )
