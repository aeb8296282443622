"""Tests for Layer 2 — structural validation, through Layer 0+1+2."""

import pytest

from tests.conftest import CUBE_10_BY_2_BY_4, SHORT_BOTTOM_RECT, STRAY_AFTER_LINE

from analogsight.ascii.loader import load_literal
from analogsight.engine.errors import ErrorKind
from analogsight.engine.pipeline import create_pipeline
from analogsight.engine.registry import Layer, get_registry


def _error(text: str):
    ctx = create_pipeline().run(load_literal(text))
    assert ctx.error is not None, "expected the literal to be rejected"
    assert ctx.value is None
    return ctx.error


def _replace_last_row(text: str, row: str) -> str:
    return text[: text.rfind("\n") + 1] + row


def test_layer2_registers_3_stages():
    create_pipeline()
    assert len(get_registry().get_layer(Layer.VALIDATION)) == 3


# --- Lines ---


@pytest.mark.parametrize(
    "text, column",
    [
        ("++", 1),
        ("II", 1),
        ("+--I", 3),
        ("I--+", 3),
        ("+---", 4),
        ("+-=-+", 2),
        (STRAY_AFTER_LINE, 5),
    ],
)
def test_malformed_lines(text, column):
    error = _error(text)
    assert error.kind is ErrorKind.MALFORMED_LINE
    assert error.location == (0, column)


def test_line_allows_trailing_whitespace():
    ctx = create_pipeline().run(load_literal("I---I   "))
    assert ctx.error is None


# --- Rectangles ---


def test_short_bottom_edge_is_width_mismatch():
    error = _error(SHORT_BOTTOM_RECT)
    assert error.kind is ErrorKind.MISMATCHED_WIDTH
    assert error.location == (3, 16)
    assert "15" in error.detail


def test_long_bottom_edge_is_width_mismatch():
    error = _error("+----+\n|    |\n+-----+")
    assert error.kind is ErrorKind.MISMATCHED_WIDTH
    assert error.location == (2, 5)


def test_missing_right_border_is_height_mismatch():
    error = _error("+----+\n|    \n+----+")
    assert error.kind is ErrorKind.MISMATCHED_HEIGHT
    assert error.location == (1, 5)


def test_shifted_right_border_is_height_mismatch():
    error = _error("+----+\n|     |\n+----+")
    assert error.kind is ErrorKind.MISMATCHED_HEIGHT
    assert error.location == (1, 5)


def test_interior_blank_row_is_height_mismatch():
    error = _error("+--+\n|  |\n\n+--+")
    assert error.kind is ErrorKind.MISMATCHED_HEIGHT
    assert error.location == (2, 0)


def test_glyph_after_top_edge_is_width_mismatch():
    error = _error("+----+ x\n|    |\n+----+")
    assert error.kind is ErrorKind.MISMATCHED_WIDTH
    assert error.location == (0, 7)


def test_error_carries_source_offset():
    error = _error("+----+\n|    \n+----+")
    # Past the end of row 1: no glyph to point at
    assert error.offset is None
    error = _error("+----+\n|    |\n+---++")
    assert error.location == (2, 4)
    assert error.offset == 14 + 4


# --- Cuboids ---


def test_shifted_top_diagonal_is_depth_mismatch():
    text = CUBE_10_BY_2_BY_4.replace("   /          / |", "    /         / |")
    error = _error(text)
    assert error.kind is ErrorKind.MISMATCHED_DEPTH
    assert error.location == (2, 3)


def test_misplaced_back_corner_is_depth_mismatch():
    text = CUBE_10_BY_2_BY_4.replace("  /          /  +", "  /          /  |")
    error = _error(text)
    assert error.kind is ErrorKind.MISMATCHED_DEPTH
    assert error.location == (3, 16)


def test_stray_glyph_in_side_face_is_depth_mismatch():
    text = CUBE_10_BY_2_BY_4.replace("|          | /", "|          |x/")
    error = _error(text)
    assert error.kind is ErrorKind.MISMATCHED_DEPTH
    assert error.location == (6, 12)


def test_narrow_front_face_is_width_mismatch():
    text = _replace_last_row(CUBE_10_BY_2_BY_4, "+---------+")
    error = _error(text)
    assert error.kind is ErrorKind.MISMATCHED_WIDTH
    assert error.location == (8, 10)


def test_top_face_without_front_face():
    error = _error("  +--+\n /  /\n/  /")
    assert error.kind is ErrorKind.MISMATCHED_DEPTH
    assert error.location == (2, 0)


def test_front_face_without_border_rows():
    error = _error("  +--+\n /  /|\n+--+ +\n+--+/")
    assert error.kind is ErrorKind.MISMATCHED_HEIGHT
    assert error.row == 2


def test_broken_top_face_reported_before_missing_front_face():
    error = _error("  +--+\n /  x\n/  /")
    assert error.kind is ErrorKind.MISMATCHED_DEPTH
    assert error.location == (1, 4)
