"""Image generation adapters."""

from .http_client import HttpImageClient
from .openai_client import OpenAIImageClient

__all__ = ["HttpImageClient", "OpenAIImageClient"]
