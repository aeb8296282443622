"""POST /api/render — draw the canonical literal for given dimensions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from analogsight.ascii.serializer import render_literal
from analogsight.models.requests import RenderRequest
from analogsight.models.responses import RenderResponse
from analogsight.models.values import AnalogValue, Cuboid, Line, Rectangle, ShapeKind, shape_kind_of

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    try:
        value = _build_value(req)
        literal = render_literal(value)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return RenderResponse(kind=shape_kind_of(value), literal=literal, value=value.model_dump())


def _build_value(req: RenderRequest) -> AnalogValue:
    if req.kind is ShapeKind.LINE:
        return Line(length=req.length)
    if req.kind is ShapeKind.RECTANGLE:
        return Rectangle(width=req.width, height=req.height)
    if req.kind is ShapeKind.CUBOID:
        return Cuboid(width=req.width, height=req.height, length=req.length)
    raise ValueError(f"Cannot render a literal of kind {req.kind.value!r}")
