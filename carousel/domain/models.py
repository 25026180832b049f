"""
Carousel value objects.

All models are created once per request and never mutated afterwards.
"""

import base64
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

MIN_SLIDE_COUNT = 3
MAX_SLIDE_COUNT = 10
DEFAULT_SLIDE_COUNT = 5


class GenerationRequest(BaseModel):
    """Validated, bounded generation request."""

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., min_length=1)
    slide_count: int = Field(
        DEFAULT_SLIDE_COUNT, ge=MIN_SLIDE_COUNT, le=MAX_SLIDE_COUNT
    )


class SlideDraft(BaseModel):
    """Text-only slide content before image attachment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    body: str
    image_prompt: Optional[str] = Field(None, alias="imagePrompt")


class GeneratedImage(BaseModel):
    """Binary image returned by an image provider."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str = "image/png"

    def to_data_uri(self) -> str:
        payload = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{payload}"


class Slide(SlideDraft):
    """A slide draft with its (possibly missing) image attached."""

    image: Optional[str] = None

    @classmethod
    def from_draft(cls, draft: SlideDraft, image: Optional[GeneratedImage]) -> "Slide":
        return cls(
            title=draft.title,
            body=draft.body,
            image_prompt=draft.image_prompt,
            image=image.to_data_uri() if image is not None else None,
        )

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"title": self.title, "body": self.body}
        if self.image_prompt:
            payload["imagePrompt"] = self.image_prompt
        payload["image"] = self.image
        return payload


class GenerationResult(BaseModel):
    """Top-level response of one generation request."""

    model_config = ConfigDict(frozen=True)

    slides: List[Slide]
    warning: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.warning is not None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "slides": [slide.to_payload() for slide in self.slides]
        }
        if self.warning:
            payload["warning"] = self.warning
        return payload
