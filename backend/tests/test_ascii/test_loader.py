"""Tests for the grid loader."""

import pytest

from tests.conftest import INDENTED_RECT, RECT_4_BY_3

from analogsight.ascii.loader import load_grid, load_literal
from analogsight.engine.evaluate import evaluate
from analogsight.models.values import Rectangle


def test_load_rows_and_columns():
    grid = load_grid(RECT_4_BY_3)
    assert grid.num_rows == 3
    assert [len(row) for row in grid.rows] == [6, 6, 6]
    assert grid.char_at(1, 0) == "|"
    assert grid.char_at(1, 5) == "|"


def test_offsets_track_source_positions():
    grid = load_grid("+--+\n|  |\n+--+")
    # Row 1 starts after "+--+\n"
    assert grid.rows[1][0].offset == 5
    assert grid.rows[2][3].offset == 13


def test_crlf_line_endings():
    grid = load_grid("+--+\r\n+--+\r\n")
    assert grid.num_rows == 2
    assert grid.row_text(0) == "+--+"
    assert grid.rows[1][0].offset == 6


def test_base_offset_and_origin():
    grid = load_grid("I-I", origin=(10, 4), base_offset=200)
    assert grid.rows[0][2].offset == 202
    assert grid.source_position(0, 2) == (10, 6)


def test_no_trimming_keeps_indentation():
    grid = load_grid(INDENTED_RECT)
    # Leading blank line is row 0, drawing starts at column 4
    assert grid.row_text(0) == ""
    assert grid.char_at(1, 4) == "+"
    assert grid.char_at(1, 3) == " "


def test_ragged_rows():
    grid = load_grid("+---+\n|\n")
    assert [len(row) for row in grid.rows] == [5, 1]
    assert grid.char_at(1, 4) == ""
    assert grid.glyph_at(1, 4) is None


def test_empty_body():
    grid = load_grid("")
    assert grid.num_rows == 0


def test_load_literal_builds_fresh_context():
    ctx = load_literal(RECT_4_BY_3)
    assert ctx.source == RECT_4_BY_3
    assert ctx.grid.num_rows == 3
    assert ctx.value is None
    assert ctx.error is None


def test_lone_carriage_return_ends_a_row():
    grid = load_grid("I-I\rI--I")
    assert grid.num_rows == 2
    assert grid.rows[1][0].offset == 4


@pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x85", "\u2028", "\u2029"])
def test_other_unicode_separators_stay_inside_the_row(separator):
    text = f"+----+\n|a{separator}b |\n+----+"
    grid = load_grid(text)
    assert grid.num_rows == 3
    assert grid.row_text(1) == f"|a{separator}b |"
    assert grid.rows[2][0].offset == 14

    assert evaluate(text).value == Rectangle(width=4, height=3)


def test_empty_and_newline_only_bodies():
    assert load_grid("").num_rows == 0
    assert load_grid("\n").num_rows == 1
    assert load_grid("a\n\n").num_rows == 2
