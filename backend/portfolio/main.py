"""
Portfolio Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers;
       the lifespan validates configuration and owns the MongoDB connection.
Who:   uvicorn (`uvicorn portfolio.main:app`) or `python -m portfolio`.

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                      FastAPI App                        │
    │                                                         │
    │  Middleware:  Request ID → Logging → GZip → CORS        │
    │                                                         │
    │  Routes (/api/v1):                                      │
    │    /register /login   /skills   /blogs   /projects      │
    │  Routes (root):  GET /   GET /health                    │
    │                                                         │
    │  Exception Handlers:                                    │
    │    Conflict→400  Unauthorized→401  NotFound→404         │
    │    RequestValidation→422  Database→500  Exception→500   │
    └─────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → validate settings → connect MongoDB → ready
    Shutdown: close MongoDB client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from portfolio import __version__
from portfolio.config import settings
from portfolio.database import MongoContext
from portfolio.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    PortfolioError,
    UnauthorizedError,
)
from portfolio.middleware.logging import RequestLoggingMiddleware
from portfolio.middleware.request_id import RequestIDMiddleware, request_id_var
from portfolio.routes import auth, blogs, health, projects, skills

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2026-01-15T12:00:00 [INFO] portfolio.services.auth_service: ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Replaced by RequestLoggingMiddleware / too chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup aborts when MONGODB_URI / JWT_SECRET are missing or MongoDB
    cannot be reached; there is nothing useful to serve without them.
    """
    setup_logging()
    logger.info("Portfolio backend starting up...")

    try:
        settings.validate_required()
    except PortfolioError as e:
        logger.error("Configuration error: %s", e.message)
        raise

    mongo = MongoContext(settings.mongodb_uri, settings.mongodb_db_name)
    await mongo.connect()
    app.state.mongo = mongo

    logger.info("Portfolio server is running on http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Portfolio backend shutting down...")
    await mongo.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "message": message,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler table:
        ConflictError           → 400
        UnauthorizedError       → 401
        NotFoundError           → 404
        RequestValidationError  → 422
        DatabaseError           → 500 (generic message, details logged)
        PortfolioError (base)   → 500
        Exception (fallback)    → 500
    """

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.info("[%s] Conflict: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "conflict", exc.message)

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        logger.info("[%s] Login rejected: %s", request_id_var.get(""), exc.context)
        return _error_response(401, "unauthorized", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Missing or mistyped body fields; FastAPI's field errors go in `details`."""
        rid = request_id_var.get("")
        details = _field_errors(exc)
        logger.warning("[%s] Invalid request body: %s", rid, details)
        return JSONResponse(
            status_code=422,
            content={
                "success": False,
                "error": "validation_error",
                "message": "Request body is missing required fields or has invalid values",
                "details": details,
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(PortfolioError)
    async def handle_portfolio_error(request: Request, exc: PortfolioError):
        logger.error("[%s] %s: %s", request_id_var.get(""), type(exc).__name__, exc.message)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again later.",
        )


def _field_errors(exc: RequestValidationError) -> list:
    """Field errors without the raw input echo (may contain a password)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Portfolio API",
        description="Registration, login and skills/blogs/projects CRUD for a portfolio site.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in reverse order of addition
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials="*" not in settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(skills.router)
    app.include_router(blogs.router)
    app.include_router(projects.router)
    app.include_router(health.router)

    return app


app = create_app()
