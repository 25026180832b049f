"""
Turns raw model text into slide drafts.

Only a fixed set of wrappers is tolerated: surrounding whitespace and a
markdown code fence around the whole payload. Anything else that is not
valid JSON is a ParseError; malformed JSON is never repaired.
"""

import json
import re
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from carousel.domain.exceptions import ParseError
from carousel.domain.models import SlideDraft
from carousel.infra.config.logging_config import get_logger

logger = get_logger("carousel.normalizer")

_OPENING_FENCE = re.compile(r"\A```[a-z0-9_+-]*[ \t]*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```\Z")


def strip_code_fences(raw: str) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence, if present."""
    text = raw.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def _decode(text: str) -> Any:
    try:
        payload = json.loads(text)
        # Some models return the whole object as a JSON string literal.
        if isinstance(payload, str):
            payload = json.loads(payload)
    except (ValueError, TypeError, RecursionError) as exc:
        raise ParseError(f"invalid JSON ({type(exc).__name__})") from exc
    return payload


def _to_draft(index: int, item: Any) -> SlideDraft:
    if not isinstance(item, dict):
        raise ParseError(f"slide {index} is not an object")
    if "imagePrompt" not in item and "image_prompt" in item:
        item = {**item, "imagePrompt": item["image_prompt"]}
    try:
        return SlideDraft.model_validate(
            {
                "title": item.get("title"),
                "body": item.get("body"),
                "imagePrompt": item.get("imagePrompt"),
            },
            strict=True,
        )
    except PydanticValidationError as exc:
        raise ParseError(f"slide {index} has an invalid shape") from exc


def normalize(raw: str, slide_count: int) -> List[SlideDraft]:
    """Parse ``raw`` into at most ``slide_count`` drafts.

    Over-production is truncated. Under-production is returned as is; the
    caller decides whether to warn about it.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise ParseError("empty response")

    payload = _decode(strip_code_fences(raw))

    slides = payload.get("slides") if isinstance(payload, dict) else None
    if not isinstance(slides, list) or not slides:
        raise ParseError("missing 'slides' array")

    drafts = [_to_draft(index, item) for index, item in enumerate(slides)]
    if len(drafts) > slide_count:
        logger.info(
            "carousel.normalize.truncated", produced=len(drafts), requested=slide_count
        )
        drafts = drafts[:slide_count]
    return drafts
