"""Diagnostic reporter — turns an AnalogLiteralError into a positioned message.

The engine only guarantees the error kind and grid location; this module
maps the location back to the enclosing source and renders a compiler-style
message with a caret under the offending glyph.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from analogsight.engine.context import GlyphGrid
from analogsight.engine.errors import AnalogLiteralError, ErrorKind

logger = logging.getLogger(__name__)


class Diagnostic(BaseModel):
    kind: ErrorKind
    message: str
    # 1-based position in the enclosing source
    line: int = Field(..., ge=1)
    column: int = Field(..., ge=1)
    offset: int | None = None
    # Grid position inside the literal body, 0-based
    row: int = 0
    grid_column: int = 0
    source_line: str = ""


def report(error: AnalogLiteralError, grid: GlyphGrid) -> Diagnostic:
    """Build a Diagnostic for an error raised while evaluating ``grid``."""
    line, column = grid.source_position(error.row, error.column)
    source_line = grid.row_text(error.row) if error.row < grid.num_rows else ""
    diagnostic = Diagnostic(
        kind=error.kind,
        message=error.detail,
        line=line + 1,
        column=column + 1,
        offset=error.offset,
        row=error.row,
        grid_column=error.column,
        source_line=source_line,
    )
    logger.debug("Reported %s at %d:%d", error.kind.value, diagnostic.line, diagnostic.column)
    return diagnostic


def render(diagnostic: Diagnostic, source_name: str = "<literal>") -> str:
    gutter = " " * len(str(diagnostic.line))
    lines = [
        f"error[{diagnostic.kind.value}]: {diagnostic.message}",
        f"{gutter}--> {source_name}:{diagnostic.line}:{diagnostic.column}",
        f"{gutter} |",
    ]
    if diagnostic.source_line:
        lines.append(f"{diagnostic.line} | {diagnostic.source_line}")
        lines.append(f"{gutter} | {' ' * diagnostic.grid_column}^")
    return "\n".join(lines)
