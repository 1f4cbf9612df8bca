"""
Middleware and exception handlers for the Meal Plan API.
"""
import logging
import time

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from mealplan.api.responses import error_response
from mealplan.utilities.constants import CORS_HEADERS
from mealplan.utilities.exceptions import MealPlanError, MethodNotAllowedError

logger = logging.getLogger("mealplan_app.middleware")


# -------------------- Middleware --------------------
class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Open CORS policy: fixed headers on every response, OPTIONS answered before routing."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_200_OK)
        else:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = await general_exception_handler(request, exc)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception:
            logger.error("%s %s failed after %.4fs", request.method, request.url.path,
                         time.time() - start_time, exc_info=True)
            raise
        logger.info("%s %s -> %d (%.4fs)", request.method, request.url.path,
                    response.status_code, time.time() - start_time)
        return response


# -------------------- Error Handlers --------------------
async def meal_plan_exception_handler(request: Request, exc: MealPlanError):
    """Render domain errors with the status they carry."""
    if exc.http_status >= 500:
        logger.error("Error on %s %s: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
    return error_response(exc.message, exc.http_status)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors (unknown path, unsupported verb) in the same envelope."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return await meal_plan_exception_handler(request, MethodNotAllowedError())
    logger.warning("HTTP %d on %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail)
    return error_response(str(exc.detail), exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or a non-object body is a 400, not FastAPI's default 422."""
    errors = exc.errors()
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, errors)
    if any(e.get("type") == "json_invalid" for e in errors):
        message = "Invalid JSON body"
    else:
        message = "Invalid request body"
    return error_response(message, status.HTTP_400_BAD_REQUEST)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception("Unexpected error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
