"""Normalizes the raw request body into a bounded GenerationRequest."""

import math
import re
from typing import Any, Mapping, Optional

from carousel.domain.exceptions import ValidationError
from carousel.domain.models import (
    DEFAULT_SLIDE_COUNT,
    MAX_SLIDE_COUNT,
    MIN_SLIDE_COUNT,
    GenerationRequest,
)

_LEADING_INT = re.compile(r"^\s*([+-]?)(\d+)")

# Anything wider is far outside the slide range; saturate before int().
_MAX_TOTAL_DIGITS = 9


def coerce_total(value: Any) -> Optional[int]:
    """Best-effort integer coercion; ``None`` when the value is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        sign, digits = match.group(1), match.group(2).lstrip("0") or "0"
        if len(digits) > _MAX_TOTAL_DIGITS:
            digits = "9" * _MAX_TOTAL_DIGITS
        return int(sign + digits)
    return None


def clamp_slide_count(value: Optional[int]) -> int:
    if value is None:
        return DEFAULT_SLIDE_COUNT
    return min(max(value, MIN_SLIDE_COUNT), MAX_SLIDE_COUNT)


def validate_request(raw: Any) -> GenerationRequest:
    """Validate ``{topic, total}``.

    Out-of-range or malformed ``total`` values are clamped or defaulted,
    never rejected. Only a missing or blank ``topic`` is an error.
    """
    body: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    topic = body.get("topic")
    if not isinstance(topic, str) or not topic.strip():
        raise ValidationError("topic required")

    slide_count = clamp_slide_count(coerce_total(body.get("total")))
    return GenerationRequest(topic=topic.strip(), slide_count=slide_count)
