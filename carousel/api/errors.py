"""
API error handling and exception mapping.

Converts domain errors into ``{"error": ...}`` responses with a status code
reflecting the failure class. Provider bodies and stack traces only go to
the logs.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from carousel.api.schemas import ErrorResponse
from carousel.domain.exceptions import CarouselError, ProviderError
from carousel.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_BY_CODE = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "CONFIGURATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "PROVIDER_ERROR": status.HTTP_502_BAD_GATEWAY,
    "IMAGE_CONTENT_ERROR": status.HTTP_502_BAD_GATEWAY,
    "PARSE_ERROR": status.HTTP_502_BAD_GATEWAY,
    "PROVIDER_TIMEOUT": status.HTTP_504_GATEWAY_TIMEOUT,
}

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed. Use POST."
INTERNAL_ERROR_MESSAGE = "Internal server error."


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


async def carousel_error_handler(request: Request, exc: CarouselError) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    log_fields = {"code": exc.code, "error": exc.message, "status_code": status_code}
    if isinstance(exc, ProviderError):
        log_fields.update(provider=exc.provider, provider_status=exc.status)
    if status_code >= 500:
        logger.error("api.error", **log_fields)
    else:
        logger.info("api.error", **log_fields)
    return error_response(status_code, exc.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = METHOD_NOT_ALLOWED_MESSAGE
    else:
        message = str(exc.detail)
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "api.unhandled_exception", error=str(exc), error_type=type(exc).__name__
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def setup_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CarouselError, carousel_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
