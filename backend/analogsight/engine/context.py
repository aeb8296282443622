"""LiteralContext — the single mutable state object flowing through all stages.

The glyph grid itself is immutable; stages only record their findings
(outline, shape kind, value, error) on the context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from analogsight.engine.errors import AnalogLiteralError, ErrorKind
from analogsight.models.values import AnalogValue, ShapeKind


class Glyph(NamedTuple):
    char: str
    row: int
    column: int
    # Absolute offset in the enclosing source
    offset: int


@dataclass(frozen=True)
class GlyphGrid:
    """Position-tagged, ragged character matrix of one literal body."""

    rows: tuple[tuple[Glyph, ...], ...] = ()
    # (line, column) of the body start in the enclosing source, 0-based
    origin: tuple[int, int] = (0, 0)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def glyph_at(self, row: int, column: int) -> Glyph | None:
        if 0 <= row < len(self.rows) and 0 <= column < len(self.rows[row]):
            return self.rows[row][column]
        return None

    def char_at(self, row: int, column: int) -> str:
        """Glyph character at (row, column), or "" past the end of the row."""
        glyph = self.glyph_at(row, column)
        return glyph.char if glyph is not None else ""

    def row_text(self, row: int) -> str:
        return "".join(g.char for g in self.rows[row])

    def source_position(self, row: int, column: int) -> tuple[int, int]:
        """Map grid coordinates to (line, column) in the enclosing source."""
        line, col = self.origin
        return (line + row, col + column if row == 0 else column)


@dataclass(frozen=True)
class RowOutline:
    """First and last non-blank columns of a row (None for a blank row)."""

    row: int
    first: int | None
    last: int | None

    @property
    def is_blank(self) -> bool:
        return self.first is None


@dataclass
class LiteralContext:
    """Shared state for one evaluation of one literal."""

    # Raw literal body
    source: str = ""
    grid: GlyphGrid = field(default_factory=GlyphGrid)
    # Rows from the first to the last non-blank row (populated by Layer 0)
    outline: list[RowOutline] = field(default_factory=list)
    shape_kind: ShapeKind = ShapeKind.UNKNOWN
    value: AnalogValue | None = None
    error: AnalogLiteralError | None = None

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    skipped_stages: set[str] = field(default_factory=set)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def error_at(self, kind: ErrorKind, row: int, column: int, detail: str) -> AnalogLiteralError:
        """Build an error located at a grid position, resolving its source offset."""
        glyph = self.grid.glyph_at(row, column)
        offset = glyph.offset if glyph is not None else None
        return AnalogLiteralError(kind, row, column, detail, offset=offset)

    def first_glyph(self) -> Glyph | None:
        """First non-blank glyph in scan order."""
        for line in self.outline:
            if not line.is_blank:
                return self.grid.rows[line.row][line.first]
        return None
