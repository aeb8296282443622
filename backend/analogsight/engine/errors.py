"""Validation errors raised by the engine stages.

A literal either evaluates completely or fails with exactly one error: the
first inconsistency found scanning top-to-bottom, left-to-right.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    UNCLASSIFIABLE = "Unclassifiable"
    MALFORMED_LINE = "MalformedLine"
    MISMATCHED_WIDTH = "MismatchedWidth"
    MISMATCHED_HEIGHT = "MismatchedHeight"
    MISMATCHED_DEPTH = "MismatchedDepth"


class AnalogLiteralError(ValueError):
    """A malformed analog literal.

    ``row`` and ``column`` are grid coordinates (0-based, relative to the
    literal body). ``offset`` is the absolute source offset of the offending
    glyph when the location points at a real glyph, else ``None``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        row: int,
        column: int,
        detail: str,
        offset: int | None = None,
    ) -> None:
        super().__init__(f"{kind.value} at {row}:{column}: {detail}")
        self._kind = kind
        self._row = row
        self._column = column
        self._detail = detail
        self._offset = offset

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    @property
    def location(self) -> tuple[int, int]:
        return (self._row, self._column)

    @property
    def detail(self) -> str:
        return self._detail

    @property
    def offset(self) -> int | None:
        return self._offset

    def __repr__(self) -> str:
        return (
            f"AnalogLiteralError({self._kind.value}, row={self._row}, "
            f"column={self._column}, detail={self._detail!r})"
        )
