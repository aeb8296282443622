"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeInt

from analogsight.models.values import ShapeKind


class EvaluateRequest(BaseModel):
    literal: str = Field(..., description="Raw analog literal body")
    origin: tuple[NonNegativeInt, NonNegativeInt] = Field(
        default=(0, 0),
        description="(line, column) of the body start in the enclosing source, 0-based",
    )
    source_name: str = Field(default="<literal>", description="Name shown in diagnostics")


class RenderRequest(BaseModel):
    kind: ShapeKind = Field(..., description="line, rectangle or cuboid")
    width: int | None = Field(default=None, description="Rectangle/cuboid width")
    height: int | None = Field(default=None, description="Rectangle/cuboid height")
    length: int | None = Field(default=None, description="Line length or cuboid depth")
