"""
Per-request context.

Every response carries X-Request-ID (the client's, or a fresh UUID) and
X-Response-Time. The id, method and path are bound to structlog's context
vars for the lifetime of the request, so any log line written while handling
it can be correlated. The id is also kept on request.state for the exception
handlers.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notepad.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            # Rendered by the exception handlers further out
            logger.error(
                "Request raised",
                extra={"error_type": type(exc).__name__, "duration_ms": _elapsed_ms(started)},
            )
            raise
        else:
            duration_ms = _elapsed_ms(started)
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers["X-Response-Time"] = f"{duration_ms}ms"
            logger.debug(
                "Request finished",
                extra={"status_code": response.status_code, "duration_ms": duration_ms},
            )
            return response
        finally:
            structlog.contextvars.clear_contextvars()


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
