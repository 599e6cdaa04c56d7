"""
Request logging middleware and the exception handlers of the Restaurant API.

Every error leaves the API in one envelope:
``{"success": false, "error": {"code", "message", "details"?}, "timestamp"}``.
"""

import time
import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4
from decimal import Decimal

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import RestaurantError

logger = logging.getLogger("restaurant.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


def make_serializable(obj):
    """Reduce validation error payloads to JSON types"""
    if isinstance(obj, Decimal):
        return float(obj)
    if isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    if isinstance(obj, (Exception, datetime)):
        return str(obj)
    return obj


def error_response(
    status_code: int, code: str, message: str, details: Optional[Any] = None
) -> JSONResponse:
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log method, path, status and duration.

    A client-supplied ``X-Request-ID`` is reused; otherwise one is generated.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed after %.4fs [%s]",
                request.method,
                request.url.path,
                time.perf_counter() - started,
                request_id,
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            "%s %s -> %d in %.4fs [%s]",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            request_id,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ------------------ Exception handlers ------------------
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed body, path or query values"""
    errors = make_serializable(exc.errors())
    logger.warning("Validation error on %s: %s", request.url.path, errors)
    return error_response(422, "VALIDATION_ERROR", "Request validation failed", errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)
    return error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))


async def restaurant_exception_handler(request: Request, exc: RestaurantError):
    """Service-layer rule violations and missing records, including missing references"""
    logger.warning("%s on %s: %s", exc.code, request.url.path, exc)
    return error_response(exc.http_status, exc.code, str(exc), exc.details)


async def persistence_exception_handler(request: Request, exc: PyMongoError):
    """Driver errors; timeouts answer 504, anything else 500"""
    if exc.timeout:
        logger.error("Database timeout on %s: %s", request.url.path, exc)
        return error_response(
            status.HTTP_504_GATEWAY_TIMEOUT,
            "PERSISTENCE_TIMEOUT",
            "The database did not answer in time",
        )

    logger.exception("Database error on %s", request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "PERSISTENCE_ERROR",
        "Database operation failed",
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s", request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )
