"""
Bev's Bakery Backend - FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers;
       uvicorn serves the module-level `app` (uvicorn bakery.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware: RateLimit → RequestID → Logging → Session   │
    │              → GZip → CORS                               │
    │                                                          │
    │  Routes:                                                 │
    │  ┌───────────────┐ ┌──────────────────┐ ┌─────────────┐  │
    │  │ /api/orders   │ │ / and /admin     │ │ /health     │  │
    │  └───────────────┘ └──────────────────┘ └─────────────┘  │
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation→400 │ NotFound→404 │ HTTP→status │ DB→500    │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration warnings, storage backend report
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from bakery import __version__
from bakery.config import settings
from bakery.database import dispose_engine
from bakery.exceptions import (
    BakeryError,
    DatabaseError,
    NotFoundError,
)
from bakery.middleware.logging import RequestLoggingMiddleware
from bakery.middleware.rate_limit import RateLimitMiddleware
from bakery.middleware.request_id import (
    UNEXPECTED_ERROR_MESSAGE,
    RequestIDMiddleware,
    request_id_var,
)
from bakery.routes import health, orders, pages

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    404: "not_found",
    405: "method_not_allowed",
    429: "rate_limit_exceeded",
}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure application logging once, at startup.

    Format: 2024-12-01T10:00:00 [INFO] bakery.access: POST /api/orders 201 ...
    Third-party loggers that report every connection are held at WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Bev's Bakery backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Development defaults still work; keep serving and say so loudly
        logger.warning("Configuration warning: %s", str(e))

    logger.info("Order storage backend: %s", settings.storage_backend)
    if not settings.uses_database:
        logger.warning("In-memory order storage: orders are lost on restart")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Bev's Bakery backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: Any = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details:
        body["details"] = details
    return body


def describe_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten pydantic errors into [{"field": ..., "message": ...}].

    Locations start with the request part ("body", "query"); that prefix is
    dropped. Model-level rules (at least one item) have no field.
    """
    described = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = str(err.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        described.append({"field": ".".join(loc), "message": message})
    return described


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP status codes and the shared error body.

    Handler hierarchy:
        RequestValidationError  → 400 (malformed order body)
        NotFoundError           → 404
        StarletteHTTPException  → its own status (404 route, 405 method)
        DatabaseError           → 500, message already generic
        BakeryError (base)      → 500
        Exception (fallback)    → 500; inside a request RequestIDMiddleware
                                  answers first so the body keeps the id
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = describe_validation_errors(list(exc.errors()))
        message = "; ".join(
            f"{e['field']}: {e['message']}" if e["field"] else e["message"]
            for e in errors
        ) or "Invalid request"
        logger.warning("[%s] Validation error on %s: %s", request_id_var.get(""), request.url.path, message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", message, {"errors": errors}),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(
                HTTP_ERROR_CODES.get(exc.status_code, "http_error"),
                str(exc.detail),
            ),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(BakeryError)
    async def handle_bakery_error(request: Request, exc: BakeryError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Only reached for errors outside RequestIDMiddleware (e.g. rate limiting)
        logger.error("Unexpected error outside request scope: %s", str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", UNEXPECTED_ERROR_MESSAGE),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Middleware executes in REVERSE order of addition: the last one added
    (rate limiting) sees the request first.
    """
    app = FastAPI(
        title="Bev's Bakery API",
        description=(
            "Order requests for Christmas fruit cake and Jamaican sorrel. "
            "Submit an order with POST /api/orders; the admin dashboard lists them."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count", "Retry-After"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie="bakery_session",
        max_age=settings.session_max_age,
        same_site="lax",
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RateLimitMiddleware)

    register_exception_handlers(app)

    app.include_router(orders.router)
    app.include_router(pages.router)
    app.include_router(health.router)

    return app


app = create_app()
