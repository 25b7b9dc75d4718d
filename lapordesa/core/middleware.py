"""
Core middleware and exception handler registration for the FastAPI application.

Provides request tracking, timing and error logging, and renders
application exceptions as ``{"error": ..., "code": ...}`` bodies.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from lapordesa.core.exceptions import BaseAppException, InternalError, ValidationError
from lapordesa.core.logging import get_logger, request_id

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each incoming request.

    The request ID is:
    - Stored in request.state.request_id
    - Bound to the logging context for the duration of the request
    - Added to response headers as X-Request-ID
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Reuse an id set by an upstream proxy
        rid = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = rid

        token = request_id.set(rid)
        try:
            response = await call_next(request)
        finally:
            request_id.reset(token)

        response.headers[self.header_name] = rid
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that measures and logs request processing time.

    Adds X-Process-Time header to responses with the processing duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        logger.info(
            "Request completed",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs error responses and exceptions during request processing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request processing failed: {exc}",
                exc_info=True,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "error_type": type(exc).__name__,
                },
            )
            raise

        if response.status_code >= 400:
            logger.warning(
                f"Request returned error status {response.status_code}",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                },
            )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register all core middlewares to the FastAPI application.

    The last middleware added is the outermost, so the request id is
    bound before timing and error logging run.
    """
    app.add_middleware(ErrorLoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logger.debug(
        "Core middlewares registered",
        extra={"middlewares": ["RequestIDMiddleware", "TimingMiddleware", "ErrorLoggingMiddleware"]},
    )


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        f"Application exception: {exc.error_code.value} - {exc.message}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
            "details": exc.details,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies as validation errors (400)."""
    field_errors = {}
    for error in exc.errors():
        field_path = ".".join(str(part) for part in error["loc"])
        field_errors[field_path] = error["msg"]

    logger.info(
        f"Request validation failed: {len(field_errors)} field(s)",
        extra={"path": request.url.path, "validation_errors": field_errors},
    )

    message = "; ".join(f"{path}: {msg}" for path, msg in field_errors.items())
    error = ValidationError(f"Validasi gagal: {message}" if message else "Validasi gagal")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render anything that escaped the services as an internal error (500)."""
    logger.error(
        f"Unexpected exception: {type(exc).__name__} - {exc}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
        },
    )
    error = InternalError(f"Terjadi kesalahan internal: {exc}")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
