"""
Application ports - abstract interfaces for the remote providers.

Concrete adapters bind their credentials and endpoints at construction time,
so holding an instance is the capability to call that provider.
"""

from abc import ABC, abstractmethod

from carousel.domain.models import GeneratedImage


class TextGenerationPort(ABC):
    """Sends a prompt to one text-generation provider."""

    name: str = "text"

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Return the raw model text for ``prompt``.

        Raises:
            ProviderError: non-success status or unexpected response shape.
            ProviderTimeoutError: the bounded wait elapsed.
        """
        pass


class ImageGenerationPort(ABC):
    """Turns an image prompt into image bytes using one image provider."""

    name: str = "image"

    @abstractmethod
    async def render(self, prompt: str) -> GeneratedImage:
        """Return the generated image for ``prompt``.

        Raises:
            ProviderError: non-success status.
            ImageContentError: the provider answered with something that is not an image.
        """
        pass
