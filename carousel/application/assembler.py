"""
Carousel pipeline service.

Coordinates the text stage, the local fallback and the image fan-out, and
decides whether the outcome is fully live, degraded with a warning, or a
terminal error.
"""

from typing import List, Optional, Sequence

from carousel.application.fallback import generate_fallback
from carousel.application.fanout import DEFAULT_IMAGE_TIMEOUT, ImageFanoutController
from carousel.application.normalizer import normalize
from carousel.application.ports import ImageGenerationPort, TextGenerationPort
from carousel.application.prompts import build_prompt
from carousel.domain.exceptions import (
    ConfigurationError,
    ParseError,
    ProviderError,
    ProviderTimeoutError,
)
from carousel.domain.models import (
    GeneratedImage,
    GenerationRequest,
    GenerationResult,
    Slide,
    SlideDraft,
)
from carousel.infra.config.logging_config import get_logger

WARNING_NO_TEXT_PROVIDER = (
    "No text provider configured; returned locally generated fallback content."
)
WARNING_TEXT_FAILED = (
    "Text generation failed; returned locally generated fallback content."
)
WARNING_FEWER_SLIDES = "The model produced {produced} of {requested} requested slides."
WARNING_IMAGES_FAILED = "Image generation failed for {failed} of {total} slides."


def attach_images(
    drafts: Sequence[SlideDraft], images: Sequence[Optional[GeneratedImage]]
) -> List[Slide]:
    """Zip drafts with their images positionally."""
    if len(drafts) != len(images):
        raise ValueError(
            f"draft/image length mismatch: {len(drafts)} drafts, {len(images)} images"
        )
    return [Slide.from_draft(draft, image) for draft, image in zip(drafts, images)]


class CarouselService:
    """
    Produces a GenerationResult for one validated request.

    ``text_client`` and ``image_client`` are optional: a missing text client
    means fallback content, a missing image client means no images (and no
    warning for that alone).
    """

    def __init__(
        self,
        text_client: Optional[TextGenerationPort] = None,
        image_client: Optional[ImageGenerationPort] = None,
        fallback_enabled: bool = True,
        image_timeout: float = DEFAULT_IMAGE_TIMEOUT,
    ):
        self.text_client = text_client
        self.image_client = image_client
        self.fallback_enabled = fallback_enabled
        self.fanout = (
            ImageFanoutController(image_client, timeout=image_timeout)
            if image_client is not None
            else None
        )
        self._log = get_logger("carousel.service")

    async def _draft_slides(self, request: GenerationRequest) -> List[SlideDraft]:
        prompt = build_prompt(request, include_image_prompt=self.image_client is not None)
        raw = await self.text_client.generate(prompt)
        return normalize(raw, request.slide_count)

    def _fallback(self, request: GenerationRequest, reason: str) -> List[SlideDraft]:
        self._log.warning(
            "carousel.fallback.used", reason=reason, slide_count=request.slide_count
        )
        drafts = generate_fallback(request.topic, request.slide_count)
        if len(drafts) != request.slide_count:
            # Fallback output must match the requested size.
            raise RuntimeError("fallback content does not match the requested size")
        return drafts

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        warnings: List[str] = []

        if self.text_client is None:
            if not self.fallback_enabled:
                raise ConfigurationError("No text generation provider is configured.")
            drafts = self._fallback(request, "no_text_provider")
            warnings.append(WARNING_NO_TEXT_PROVIDER)
        else:
            try:
                drafts = await self._draft_slides(request)
            except (ProviderError, ProviderTimeoutError, ParseError) as exc:
                self._log.warning(
                    "carousel.text.failed",
                    provider=self.text_client.name,
                    error=exc.message,
                    code=exc.code,
                )
                if not self.fallback_enabled:
                    raise
                drafts = self._fallback(request, exc.code)
                warnings.append(WARNING_TEXT_FAILED)
            else:
                if len(drafts) < request.slide_count:
                    warnings.append(
                        WARNING_FEWER_SLIDES.format(
                            produced=len(drafts), requested=request.slide_count
                        )
                    )

        if self.fanout is not None:
            images = await self.fanout.render_all(request.topic, drafts)
            failed = sum(1 for image in images if image is None)
            if failed:
                warnings.append(
                    WARNING_IMAGES_FAILED.format(failed=failed, total=len(images))
                )
        else:
            images = [None] * len(drafts)

        slides = attach_images(drafts, images)
        result = GenerationResult(
            slides=slides, warning=" ".join(warnings) if warnings else None
        )
        self._log.info(
            "carousel.generated",
            slide_count=len(result.slides),
            degraded=result.degraded,
        )
        return result
