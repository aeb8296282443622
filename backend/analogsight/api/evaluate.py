"""POST /api/evaluate — evaluate one analog literal."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from analogsight.config import Settings
from analogsight.dependencies import get_settings
from analogsight.diagnostics.reporter import render, report
from analogsight.engine.evaluate import evaluate
from analogsight.models.requests import EvaluateRequest
from analogsight.models.responses import EvaluateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_literal(
    req: EvaluateRequest,
    settings: Settings = Depends(get_settings),
) -> EvaluateResponse:
    if len(req.literal) > settings.max_literal_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Literal exceeds {settings.max_literal_chars} characters",
        )

    result = evaluate(req.literal, origin=req.origin)

    if result.error is not None:
        diagnostic = report(result.error, result.grid)
        logger.info("Rejected literal: %s", result.error)
        detail = diagnostic.model_dump(mode="json")
        detail["rendered"] = render(diagnostic, req.source_name)
        raise HTTPException(status_code=422, detail=detail)

    return EvaluateResponse(kind=result.kind, value=result.value.model_dump())
