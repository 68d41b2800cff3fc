"""
Exception handlers registered on the FastAPI application.

Domain errors keep their own status code and error code; anything else is
logged with a traceback and returned as a 500 carrying an error id.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import LeadTrackError, error_response
from app.core.logging_config import logger


async def leadtrack_exception_handler(request: Request, exc: LeadTrackError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.log_error_with_context(exc, context=f"{request.method} {request.url.path}")
    else:
        logger.warning(
            f"{request.method} {request.url.path} rejected: {exc.code} - {exc.message}",
            extra={"event_type": "domain_error", "error_code": exc.code}
        )
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=error_response(exc), headers=headers)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unexpected errors"""
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "http_method": request.method,
            "http_path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": str(exc) if settings.DEBUG else "An error occurred"
        }
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LeadTrackError, leadtrack_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
