"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from analogsight.models.values import ShapeKind


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class EvaluateResponse(BaseModel):
    kind: ShapeKind
    # Dimensions plus derived area/volume, e.g. {"width": 4, "height": 3, "area": 12}
    value: dict[str, int] = Field(default_factory=dict)


class RenderResponse(BaseModel):
    kind: ShapeKind
    literal: str
    value: dict[str, int] = Field(default_factory=dict)
