"""
Application layer - the carousel generation pipeline.

Validation, prompt construction, model-output normalization, local fallback
content, concurrent image fan-out and final assembly.
"""

from .assembler import CarouselService, attach_images
from .fallback import generate_fallback
from .fanout import ImageFanoutController
from .normalizer import normalize, strip_code_fences
from .ports import ImageGenerationPort, TextGenerationPort
from .prompts import build_image_prompt, build_prompt
from .validation import validate_request

__all__ = [
    "CarouselService",
    "attach_images",
    "generate_fallback",
    "ImageFanoutController",
    "normalize",
    "strip_code_fences",
    "ImageGenerationPort",
    "TextGenerationPort",
    "build_image_prompt",
    "build_prompt",
    "validate_request",
]
