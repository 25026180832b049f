"""
API schemas for the carousel endpoint.

The request body is validated leniently by the application layer, so
``GenerateBody`` only documents it for OpenAPI.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class GenerateBody(BaseModel):
    """Inbound body of ``POST /api/generate``."""

    topic: str = Field(..., json_schema_extra={"example": "produtividade"})
    total: Optional[int] = Field(
        5, description="Number of slides, clamped to 3..10", json_schema_extra={"example": 5}
    )


class SlideResponse(BaseModel):
    title: str
    body: str
    imagePrompt: Optional[str] = Field(
        None, description="English image description; omitted when absent"
    )
    image: Optional[str] = Field(
        None, description="data:<mime>;base64,<payload> or null"
    )


class CarouselResponse(BaseModel):
    slides: List[SlideResponse]
    warning: Optional[str] = Field(
        None, description="Set when the result is degraded but usable"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Human-readable error description")


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    text_provider: Optional[str] = None
    image_provider: Optional[str] = None
