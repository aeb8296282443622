"""AnalogSight literal evaluation engine."""

from analogsight.engine.registry import stage, Layer, get_registry
from analogsight.engine.context import LiteralContext, GlyphGrid, Glyph
from analogsight.engine.errors import AnalogLiteralError, ErrorKind
from analogsight.engine.pipeline import Pipeline

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "LiteralContext",
    "GlyphGrid",
    "Glyph",
    "AnalogLiteralError",
    "ErrorKind",
    "Pipeline",
]
