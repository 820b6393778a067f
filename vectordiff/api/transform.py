"""POST /api/transform and /api/detect — thin wrappers over the engine."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from vectordiff.config import Settings
from vectordiff.dependencies import get_settings
from vectordiff.engine.descriptor import parse_descriptor
from vectordiff.engine.detection import detect_transformation
from vectordiff.engine.transformer import apply_transformations
from vectordiff.models.requests import DetectRequest, TransformRequest
from vectordiff.models.responses import DetectResponse, TransformResponse
from vectordiff.utils.affine import fold, to_svg_matrix

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/transform", response_model=TransformResponse)
async def transform(
    request: TransformRequest,
    settings: Settings = Depends(get_settings),
) -> TransformResponse:
    mode = request.scale_center or settings.scale_center_mode
    try:
        result = apply_transformations(request.object, request.transformations, scale_center=mode)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e

    try:
        parsed = parse_descriptor(result.transform)
        matrix = list(to_svg_matrix(fold(parsed)))
    except ValueError:
        # Pre-existing descriptor text that cannot be folded
        parsed, matrix = [], None

    logger.info("Applied %d transformation(s) to %r", len(request.transformations), result.id)
    return TransformResponse(object=result, fragments=len(parsed), matrix=matrix)


@router.post("/detect", response_model=DetectResponse)
async def detect(request: DetectRequest) -> DetectResponse:
    detected = detect_transformation(request.previous, request.current)
    if detected is None:
        return DetectResponse()
    return DetectResponse(transformation=detected.model_dump(by_alias=True, exclude_none=True))
