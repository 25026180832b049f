"""
Domain exceptions for carousel generation.

Each exception carries a stable ``code`` that the API layer maps onto an
HTTP status. Provider bodies are kept on the exception for logging only.
"""

from typing import Optional


class CarouselError(Exception):
    """Base class for carousel-specific errors."""

    def __init__(self, message: str, code: str = "CAROUSEL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(CarouselError):
    """Raised when the inbound request is missing required input."""

    def __init__(self, message: str = "topic required"):
        super().__init__(message, "VALIDATION_ERROR")


class ConfigurationError(CarouselError):
    """Raised when a required provider credential or setting is absent."""

    def __init__(self, message: str):
        super().__init__(message, "CONFIGURATION_ERROR")


class ProviderError(CarouselError):
    """Raised when a remote provider answers with a non-success status or an unexpected shape."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[str] = None,
        provider: Optional[str] = None,
    ):
        self.status = status
        self.body = body
        self.provider = provider
        super().__init__(message)
        self.code = "PROVIDER_ERROR"


class ImageContentError(ProviderError):
    """Raised when an image provider answers successfully but not with an image."""

    def __init__(self, content_type: Optional[str], provider: Optional[str] = None):
        super().__init__(
            f"Image provider returned non-image content ({content_type or 'unknown'})",
            provider=provider,
        )
        self.content_type = content_type
        self.code = "IMAGE_CONTENT_ERROR"


class ProviderTimeoutError(CarouselError):
    """Raised when a remote call does not resolve within its bound."""

    def __init__(self, provider: str, timeout: float):
        self.provider = provider
        self.timeout = timeout
        super().__init__(
            f"{provider} did not respond within {timeout:g}s", "PROVIDER_TIMEOUT"
        )


class ParseError(CarouselError):
    """Raised when model output cannot be turned into slide drafts."""

    def __init__(self, reason: str):
        super().__init__(f"Model output could not be parsed: {reason}", "PARSE_ERROR")
