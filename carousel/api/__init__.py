"""HTTP API: router, schemas and error handlers."""

from .errors import setup_error_handlers
from .routes import router

__all__ = ["router", "setup_error_handlers"]
