"""Tests for Layer 0 — outline extraction."""

from tests.conftest import INDENTED_RECT, RECT_4_BY_3

from analogsight.ascii.loader import load_literal
from analogsight.engine.pipeline import create_pipeline
from analogsight.engine.registry import Layer


def _outline(text: str):
    ctx = create_pipeline().run_layer(load_literal(text), Layer.LOADING)
    return ctx.outline


def test_outline_spans_every_row():
    outline = _outline(RECT_4_BY_3)
    assert [(o.row, o.first, o.last) for o in outline] == [(0, 0, 5), (1, 0, 5), (2, 0, 5)]


def test_outline_trims_blank_rows_and_keeps_indentation():
    outline = _outline(INDENTED_RECT)
    assert [o.row for o in outline] == [1, 2, 3, 4]
    assert all(o.first == 4 and o.last == 13 for o in outline)


def test_outline_keeps_interior_blank_rows():
    outline = _outline("+--+\n\n+--+")
    assert len(outline) == 3
    assert outline[1].is_blank


def test_outline_of_blank_literal_is_empty():
    assert _outline("") == []
    assert _outline("\n   \n\t\n") == []


def test_trailing_spaces_do_not_extend_row():
    outline = _outline("+--+   ")
    assert outline[0].last == 3
