"""
Structured logging for the carousel service.

Events carry dotted names (``carousel.text.failed``, ``request.completed``).
Request-scoped fields such as ``request_id`` and ``slide_count`` live in
contextvars and are merged into every event emitted while a request runs.
"""

import logging
from typing import Any, MutableMapping, Optional

import structlog

from carousel.infra.config.settings import Settings, get_settings

# Provider SDKs log every HTTP exchange at INFO.
QUIET_LOGGERS = ("httpx", "httpcore", "openai")

SECRET_FIELDS = frozenset({"api_key", "authorization", "x-goog-api-key"})
REDACTED = "***"


def redact_secrets(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Mask provider credentials that end up in an event."""
    for field in SECRET_FIELDS.intersection(event_dict):
        event_dict[field] = REDACTED
    return event_dict


def setup_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Explicit ``log_level``/``log_format`` win over ``settings``.
    """
    settings = settings or get_settings()
    level = logging.getLevelName((log_level or settings.log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    as_json = (log_format or settings.log_format).lower() == "json"

    logging.basicConfig(format="%(message)s", level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_secrets,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True)
            if as_json
            else structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


def bind_context(**fields: Any) -> None:
    structlog.contextvars.bind_contextvars(**fields)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
