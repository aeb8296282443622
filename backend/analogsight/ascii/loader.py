"""Grid loader — raw literal body → GlyphGrid.

Splits on line boundaries and tags every character with its row, column and
absolute source offset. Nothing is trimmed, reflowed or tab-expanded: grid
columns are the columns of the source text, which is what diagnostics point at.
"""

from __future__ import annotations

import logging
import re

from analogsight.engine.context import Glyph, GlyphGrid, LiteralContext

logger = logging.getLogger(__name__)

# Only \n, \r\n and \r end a row. Form feeds, \x85, \u2028 and the other
# separators str.splitlines() honours are ordinary glyphs inside a row.
_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


def _split_rows(text: str) -> list[tuple[str, str]]:
    """(content, line break) pairs; a trailing line break opens no new row."""
    pieces = _LINE_BREAK.split(text)
    contents = pieces[0::2]
    breaks = pieces[1::2] + [""]
    rows = list(zip(contents, breaks))
    if rows[-1] == ("", ""):
        rows.pop()
    return rows


def load_grid(text: str, origin: tuple[int, int] = (0, 0), base_offset: int = 0) -> GlyphGrid:
    """Load a literal body into a position-tagged grid.

    Args:
        text: The literal body exactly as written in the source.
        origin: (line, column) of the body start in the enclosing source.
        base_offset: Absolute source offset of the body start.
    """
    rows: list[tuple[Glyph, ...]] = []
    offset = base_offset

    for row_idx, (content, line_break) in enumerate(_split_rows(text)):
        rows.append(tuple(
            Glyph(char, row_idx, col, offset + col) for col, char in enumerate(content)
        ))
        offset += len(content) + len(line_break)

    return GlyphGrid(rows=tuple(rows), origin=origin)


def load_literal(text: str, origin: tuple[int, int] = (0, 0), base_offset: int = 0) -> LiteralContext:
    """Load a literal body into a fresh LiteralContext."""
    ctx = LiteralContext(source=text, grid=load_grid(text, origin, base_offset))
    logger.debug("Loaded literal: %d rows", ctx.grid.num_rows)
    return ctx
