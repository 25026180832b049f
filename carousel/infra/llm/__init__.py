"""Text generation adapters."""

from .gemini_client import GeminiTextClient
from .langchain_client import LangChainTextClient

__all__ = ["GeminiTextClient", "LangChainTextClient"]
