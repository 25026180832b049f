"""
Domain layer - carousel value objects and the error taxonomy.

Nothing in this package performs I/O.
"""

from .exceptions import (
    CarouselError,
    ConfigurationError,
    ImageContentError,
    ParseError,
    ProviderError,
    ProviderTimeoutError,
    ValidationError,
)
from .models import (
    DEFAULT_SLIDE_COUNT,
    MAX_SLIDE_COUNT,
    MIN_SLIDE_COUNT,
    GeneratedImage,
    GenerationRequest,
    GenerationResult,
    Slide,
    SlideDraft,
)

__all__ = [
    "CarouselError",
    "ConfigurationError",
    "ImageContentError",
    "ParseError",
    "ProviderError",
    "ProviderTimeoutError",
    "ValidationError",
    "DEFAULT_SLIDE_COUNT",
    "MAX_SLIDE_COUNT",
    "MIN_SLIDE_COUNT",
    "GeneratedImage",
    "GenerationRequest",
    "GenerationResult",
    "Slide",
    "SlideDraft",
]
