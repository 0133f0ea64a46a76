"""
NoteKeeper Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the services, registers
       middleware, exception handlers and routers, and returns the app.
Who:   uvicorn (`notekeeper.main:app`), the CLI entry point, and tests
       (which call create_app() directly for an isolated note store).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:                                            │
    │    POST /api/login          (public)                │
    │    GET|POST /api/items      (bearer token)          │
    │    PUT|DELETE /api/items/{id} (bearer token)        │
    │    GET /api/health          (public)                │
    │                                                     │
    │  app.state:                                         │
    │    auth_service  (user directory + token secret)    │
    │    note_service  (owns the NoteStore)               │
    └─────────────────────────────────────────────────────┘

Error responses:
    Every failure is `{"error": "<message>"}` with the status carried by the
    exception class (see exceptions.py). Unknown routes get 404
    "Route not found"; anything unexpected gets 500 "Something went wrong!".
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notekeeper import __version__
from notekeeper.config import Settings, settings as default_settings
from notekeeper.exceptions import InternalError, NoteKeeperError
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import RequestIDMiddleware, request_id_var
from notekeeper.routes import auth, health, notes
from notekeeper.services.auth_service import AuthService
from notekeeper.services.note_service import NoteService
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging once for the whole process.

    Format: 2024-01-15T12:00:00 [INFO] notekeeper.access: GET /api/items 200 ...
    Output goes to stdout so container runtimes pick it up.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config: Settings = app.state.settings

    setup_logging(config.log_level)
    logger.info("=" * 60)
    logger.info("NoteKeeper Backend %s starting up...", __version__)

    try:
        config.validate_required_for_production()
    except ValueError as e:
        # Keep serving: the demo credentials work with the default secret
        logger.warning("%s", str(e))

    logger.info("Notes in store: %d", len(app.state.note_service.store))
    logger.info("Server ready at http://%s:%d", config.host, config.port)
    logger.info("=" * 60)

    yield

    logger.info("NoteKeeper Backend shutting down. In-memory notes are discarded.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to `{"error": message}` responses.

    Handler hierarchy:
        NoteKeeperError (and subclasses) → exc.status_code
        RequestValidationError           → 400 "Invalid request body"
        HTTPException 404 / 405          → 404 "Route not found"
        HTTPException (other)            → its status, its detail
        Exception (fallback)             → 500 "Something went wrong!"

    Route errors are already caught by RequestLoggingMiddleware; the
    Exception handler only sees failures raised outside it.

    Details (context, stack traces) are logged server-side only.
    """

    @app.exception_handler(NoteKeeperError)
    async def handle_app_error(request: Request, exc: NoteKeeperError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request body: %s", rid, exc.errors())
        return _error(400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return _error(404, "Route not found")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return _error(500, InternalError.default_message)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every call builds a fresh NoteStore, so two apps never share notes.

    Args:
        settings: Explicit configuration; defaults to the environment-derived
                  module-level settings.
    """
    config = settings or default_settings

    app = FastAPI(
        title="NoteKeeper API",
        description="Notes API with JWT bearer authentication and in-memory storage.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Services ──────────────────────────────────────────────────────────
    now = datetime.now(timezone.utc)
    store = NoteStore.seeded(now) if config.seed_notes else NoteStore()

    app.state.settings = config
    app.state.note_service = NoteService(store)
    app.state.auth_service = AuthService(
        secret=config.jwt_secret,
        ttl=timedelta(hours=config.token_ttl_hours),
        algorithm=config.jwt_algorithm,
    )

    # ── Middleware ────────────────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


app = create_app()
