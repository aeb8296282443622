"""Edge checks shared by the structural validators. No stage registrations.

Every helper raises the first violation it meets, scanning left to right,
with the error kind chosen by the caller.
"""

from __future__ import annotations

from analogsight.engine.context import LiteralContext, RowOutline
from analogsight.engine.errors import ErrorKind
from analogsight.engine.glyphs import CORNER, FILL, is_blank


def check_lead(ctx: LiteralContext, line: RowOutline, column: int, glyph: str, kind: ErrorKind) -> None:
    """The row's first glyph must be ``glyph`` at ``column``."""
    if line.is_blank:
        raise ctx.error_at(kind, line.row, max(column, 0), f"row is blank, expected {glyph!r}")
    if line.first < column:
        found = ctx.grid.char_at(line.row, line.first)
        raise ctx.error_at(
            kind, line.row, line.first, f"unexpected {found!r} left of the {glyph!r} edge"
        )
    if line.first > column:
        raise ctx.error_at(kind, line.row, max(column, 0), f"missing {glyph!r} edge")
    check_glyph(ctx, line.row, column, glyph, kind)


def check_glyph(ctx: LiteralContext, row: int, column: int, glyph: str, kind: ErrorKind) -> None:
    found = ctx.grid.char_at(row, column)
    if found == glyph:
        return
    if found == "" or is_blank(found):
        raise ctx.error_at(kind, row, column, f"missing {glyph!r} edge")
    raise ctx.error_at(kind, row, column, f"expected {glyph!r}, found {found!r}")


def check_gap(ctx: LiteralContext, row: int, start: int, stop: int, kind: ErrorKind) -> None:
    """Columns in [start, stop) must be blank (or past the end of the row)."""
    for column in range(start, stop):
        found = ctx.grid.char_at(row, column)
        if found and not is_blank(found):
            raise ctx.error_at(kind, row, column, f"unexpected {found!r} between edges")


def check_tail(ctx: LiteralContext, line: RowOutline, column: int, kind: ErrorKind) -> None:
    """Nothing but whitespace may follow ``column`` on the row."""
    if line.is_blank or line.last <= column:
        return
    check_gap(ctx, line.row, column + 1, line.last + 1, kind)


def measure_border(ctx: LiteralContext, line: RowOutline) -> int:
    """Measure a ``+-…-+`` edge starting at the row's first glyph.

    Returns the column of the closing corner. Violations are
    ``MismatchedWidth``.
    """
    row, left = line.row, line.first
    column = left + 1
    while ctx.grid.char_at(row, column) == FILL:
        column += 1

    found = ctx.grid.char_at(row, column)
    if found != CORNER:
        if found == "" or is_blank(found):
            raise ctx.error_at(
                ErrorKind.MISMATCHED_WIDTH, row, column, "edge ends without a closing '+'"
            )
        raise ctx.error_at(ErrorKind.MISMATCHED_WIDTH, row, column, f"unexpected {found!r} in edge")
    if column == left + 1:
        raise ctx.error_at(ErrorKind.MISMATCHED_WIDTH, row, column, "edge has no '-' fill")
    return column


def check_border(ctx: LiteralContext, line: RowOutline, left: int, width: int) -> int:
    """A ``+-…-+`` edge at ``left`` must have exactly ``width`` fill glyphs.

    The left corner is checked by the caller. Returns the column of the
    closing corner. Violations are ``MismatchedWidth``.
    """
    row = line.row
    right = left + width + 1

    for column in range(left + 1, right):
        found = ctx.grid.char_at(row, column)
        if found == FILL:
            continue
        if found == CORNER:
            raise ctx.error_at(
                ErrorKind.MISMATCHED_WIDTH,
                row,
                column,
                f"edge is {column - left - 1} '-' wide, expected {width}",
            )
        if found == "" or is_blank(found):
            raise ctx.error_at(
                ErrorKind.MISMATCHED_WIDTH, row, column, f"edge ends early, expected {width} '-'"
            )
        raise ctx.error_at(ErrorKind.MISMATCHED_WIDTH, row, column, f"unexpected {found!r} in edge")

    found = ctx.grid.char_at(row, right)
    if found == FILL:
        raise ctx.error_at(
            ErrorKind.MISMATCHED_WIDTH, row, right, f"edge is wider than {width} '-'"
        )
    if found != CORNER:
        raise ctx.error_at(
            ErrorKind.MISMATCHED_WIDTH, row, right, "edge ends without a closing '+'"
        )
    return right
