"""
Carousel generation endpoint.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from carousel.api.schemas import CarouselResponse, ErrorResponse, GenerateBody
from carousel.application.assembler import CarouselService
from carousel.application.validation import coerce_total, validate_request
from carousel.domain.models import GenerationRequest
from carousel.infra.config.dependencies import get_carousel_service
from carousel.infra.config.logging_config import bind_context, get_logger

router = APIRouter(tags=["carousel"])
logger = get_logger("api.generate")


async def read_json_body(request: Request) -> Any:
    """Request body as JSON; anything unparseable becomes an empty object."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        # Integer literals go through the same saturating coercion as ``total``.
        return json.loads(raw, parse_int=coerce_total)
    except (ValueError, UnicodeDecodeError, RecursionError):
        logger.info("request.body.unparseable", size=len(raw))
        return {}


async def get_generation_request(request: Request) -> GenerationRequest:
    """Validated request; declared ahead of the service so bad input is a 400."""
    generation_request = validate_request(await read_json_body(request))
    bind_context(slide_count=generation_request.slide_count)
    return generation_request


@router.post(
    "/generate",
    response_model=None,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": GenerateBody.model_json_schema()}},
            "required": True,
        }
    },
    responses={
        200: {"model": CarouselResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def generate_carousel(
    generation_request: GenerationRequest = Depends(get_generation_request),
    service: CarouselService = Depends(get_carousel_service),
) -> JSONResponse:
    """Generate a carousel for ``{topic, total}``.

    Degraded results (fallback text, missing images) still return 200 with a
    ``warning``.
    """
    result = await service.generate(generation_request)
    return JSONResponse(content=result.to_payload())


@router.options("/generate", include_in_schema=False)
async def generate_preflight() -> Response:
    return Response(status_code=200)
