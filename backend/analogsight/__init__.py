"""AnalogSight — ASCII-art analog literals evaluated to exact dimensions."""

from analogsight.ascii.serializer import render_literal
from analogsight.engine.errors import AnalogLiteralError, ErrorKind
from analogsight.engine.evaluate import EvaluationResult, analog_literal, evaluate
from analogsight.models.values import Cuboid, Line, Rectangle, ShapeKind

__all__ = [
    "analog_literal",
    "evaluate",
    "render_literal",
    "EvaluationResult",
    "AnalogLiteralError",
    "ErrorKind",
    "Line",
    "Rectangle",
    "Cuboid",
    "ShapeKind",
]
