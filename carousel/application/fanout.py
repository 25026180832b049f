"""
Concurrent per-slide image generation.

Every slide gets its own task and its own timeout. A failure or timeout only
ever turns that slide's result into ``None``; sibling results and their order
are unaffected.
"""

import asyncio
from typing import List, Optional, Sequence

from carousel.application.ports import ImageGenerationPort
from carousel.application.prompts import build_image_prompt
from carousel.domain.models import GeneratedImage, SlideDraft
from carousel.infra.config.logging_config import get_logger

DEFAULT_IMAGE_TIMEOUT = 8.0


class ImageFanoutController:
    """Runs one image render per slide, all at once, each with its own bound."""

    def __init__(
        self, image_client: ImageGenerationPort, timeout: float = DEFAULT_IMAGE_TIMEOUT
    ):
        self.image_client = image_client
        self.timeout = timeout
        self._log = get_logger("carousel.fanout")

    async def _render_one(self, index: int, prompt: str) -> Optional[GeneratedImage]:
        try:
            return await asyncio.wait_for(
                self.image_client.render(prompt), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            self._log.warning(
                "carousel.image.timeout",
                slide=index,
                provider=self.image_client.name,
                timeout=self.timeout,
            )
        except Exception as exc:
            self._log.warning(
                "carousel.image.failed",
                slide=index,
                provider=self.image_client.name,
                error=str(exc),
                error_type=type(exc).__name__,
            )
        return None

    async def render_all(
        self, topic: str, drafts: Sequence[SlideDraft]
    ) -> List[Optional[GeneratedImage]]:
        """Images for ``drafts``, same length and order; ``None`` where a slide failed."""
        prompts = [build_image_prompt(topic, draft) for draft in drafts]
        tasks = [
            asyncio.create_task(self._render_one(index, prompt))
            for index, prompt in enumerate(prompts)
        ]
        results = await asyncio.gather(*tasks)

        self._log.info(
            "carousel.images.done",
            requested=len(drafts),
            rendered=sum(1 for image in results if image is not None),
        )
        return list(results)
