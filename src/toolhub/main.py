"""
Toolhub - Main Application.

FastAPI application exposing one FunctionHub: visible descriptors, dispatch
and meta-mode control.
"""

import logging
import sys
import traceback
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from toolhub import __version__
from toolhub.config import get_settings
from toolhub.core.hub import FunctionHub
from toolhub.exceptions import ToolhubException, ValidationException
from toolhub.schemas import HealthResponse

from toolhub.api.routes.functions import router as functions_router
from toolhub.api.routes.meta import router as meta_router
from toolhub.api.routes.metrics import router as metrics_router

logger = logging.getLogger("toolhub")


def configure_logging(level: str = "INFO") -> None:
    """Configure standard logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _error_content(code: str, message: str, details=None, request_id=None) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
            "request_id": request_id,
        }
    }


def create_app(hub: FunctionHub | None = None) -> FastAPI:
    """
    Build the application around a hub.

    Args:
        hub: Session hub to expose; built from settings when omitted
    """
    settings = get_settings()
    configure_logging(settings.app_log_level)

    app = FastAPI(
        title="Toolhub API",
        description="Namespaced function registry and dispatcher for LLM tool calling.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.hub = hub or FunctionHub.from_settings(settings)

    logger.info(
        f"Starting Toolhub API v{__version__} "
        f"[env={settings.app_env}] "
        f"[registry={settings.registry.to_dict()}]"
    )

    # =========================================================================
    # Middleware
    # =========================================================================

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Add request ID to all requests."""
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id

        logger.info(f"[{request_id}] {request.method} {request.url.path}")
        response = await call_next(request)
        logger.info(f"[{request_id}] {request.method} {request.url.path} -> {response.status_code}")

        response.headers["X-Request-ID"] = request_id
        return response

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(ToolhubException)
    async def toolhub_exception_handler(request: Request, exc: ToolhubException):
        """Handle Toolhub custom exceptions."""
        logger.warning(f"ToolhubException: {exc.code} - {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(
                exc.code,
                exc.message,
                exc.details,
                getattr(request.state, "request_id", None),
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Render malformed bodies with the standard error envelope."""
        error = ValidationException(
            "Invalid request body",
            errors=[
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ],
        )
        return JSONResponse(
            status_code=error.status_code,
            content=_error_content(
                error.code,
                error.message,
                error.details,
                getattr(request.state, "request_id", None),
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unhandled exception on {request.url.path}")
        logger.error(f"Traceback:\n{traceback.format_exc()}")
        return JSONResponse(
            status_code=500,
            content=_error_content(
                "INTERNAL_ERROR",
                str(exc) if settings.app_debug else "An unexpected error occurred",
                None,
                getattr(request.state, "request_id", None),
            ),
        )

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health_check(request: Request):
        """Health check endpoint."""
        current = request.app.state.hub
        return HealthResponse(
            status="healthy",
            version=__version__,
            registry={
                "separator": current.registry.separator,
                "max_active": current.meta.max_active,
                "meta_mode": current.meta_mode_enabled,
            },
            app_env=settings.app_env,
            is_production=settings.is_production,
            registered_functions=len(current.registry),
        )

    app.include_router(functions_router)
    app.include_router(meta_router)
    app.include_router(metrics_router)

    return app
