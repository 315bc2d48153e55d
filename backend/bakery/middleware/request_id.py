"""
Bev's Bakery Backend - Request ID Middleware
=============================================

What:  Gives every request a short correlation id and echoes it back.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one; stores it in a ContextVar for loggers and exception
       handlers, and in request.state for route handlers.

Error responses include the id as `request_id`, so a customer reporting a
failed order can quote it and the matching log lines can be found.

Unexpected exceptions are turned into the generic 500 body here, while the
id is still set. Starlette's own catch-all runs outside every middleware,
after the ContextVar has been reset.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_CLIENT_ID_LENGTH = 64
UNEXPECTED_ERROR_MESSAGE = (
    "An unexpected error occurred. Please try again or contact us directly."
)

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def unexpected_error_response(rid: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": UNEXPECTED_ERROR_MESSAGE,
            "request_id": rid,
        },
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns the request id and adds it to the response headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        client_id = request.headers.get(REQUEST_ID_HEADER, "").strip()
        # Client ids end up in logs; cap them so a header can't flood a line
        rid = client_id[:MAX_CLIENT_ID_LENGTH] if client_id else new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid, request.method, request.url.path, str(exc),
                exc_info=True,
            )
            response = unexpected_error_response(rid)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
