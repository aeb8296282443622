"""Evaluate a literal end to end: load, run the pipeline, hand back one outcome."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from analogsight.ascii.loader import load_literal
from analogsight.engine.context import GlyphGrid
from analogsight.engine.errors import AnalogLiteralError
from analogsight.engine.pipeline import Pipeline, create_pipeline
from analogsight.models.values import AnalogValue, ShapeKind


@dataclass(frozen=True)
class EvaluationResult:
    """Exactly one of ``value`` or ``error`` is set."""

    kind: ShapeKind
    grid: GlyphGrid
    value: AnalogValue | None = None
    error: AnalogLiteralError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> AnalogValue:
        if self.error is not None:
            raise self.error
        return self.value


@functools.lru_cache(maxsize=1)
def default_pipeline() -> Pipeline:
    return create_pipeline()


def evaluate(
    text: str,
    origin: tuple[int, int] = (0, 0),
    base_offset: int = 0,
    pipeline: Pipeline | None = None,
) -> EvaluationResult:
    """Evaluate a literal body. Malformed literals come back as ``result.error``."""
    ctx = load_literal(text, origin, base_offset)
    ctx = (pipeline or default_pipeline()).run(ctx)
    if ctx.error is not None:
        return EvaluationResult(kind=ctx.shape_kind, grid=ctx.grid, error=ctx.error)
    return EvaluationResult(kind=ctx.shape_kind, grid=ctx.grid, value=ctx.value)


def analog_literal(text: str) -> AnalogValue:
    """Evaluate a literal or raise ``AnalogLiteralError``.

    Meant for module-level constants, so a malformed drawing stops the
    module from importing::

        MODAL = analog_literal('''
            +--------+
            |        |
            +--------+
        ''')
    """
    return evaluate(text).unwrap()
