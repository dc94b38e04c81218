# Main application entry point
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import health_router, notes_router
from .config import Settings, get_settings
from .core.exceptions import SimpleNotesError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .database import Database

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting SimpleNotes application",
        extra={"version": settings.app_version, "environment": settings.environment, "debug": settings.debug},
    )

    database = Database.from_settings(settings)
    if settings.create_tables_on_startup:
        try:
            await database.create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            await database.dispose()
            raise
    app.state.database = database

    yield

    # Shutdown
    logger.info("Shutting down SimpleNotes application")
    await database.dispose()
    logger.info("Database connections closed")


def _error_response(status_code: int, error: str, message: str, details: Optional[Any] = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Map application exceptions to HTTP responses."""

    @app.exception_handler(SimpleNotesError)
    async def handle_app_error(request: Request, exc: SimpleNotesError):
        if exc.status_code >= 500:
            logger.error(f"{exc.error_type}: {exc.message}", extra={"context": exc.context})
        else:
            logger.info(
                f"{exc.error_type} on {request.method} {request.url.path}: {exc.message}",
                extra={"context": exc.context},
            )
        return _error_response(exc.status_code, exc.error_type, exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        # schema failures are client errors like any other validation failure
        errors = jsonable_encoder(exc.errors())
        message = errors[0]["msg"] if errors else "Invalid request"
        logger.info(f"Request validation failed on {request.method} {request.url.path}: {message}")
        return _error_response(400, "ValidationError", message, {"errors": errors})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}",
            exc_info=exc,
        )
        return _error_response(500, "InternalServerError", "An internal error occurred")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="SimpleNotes",
        description="Minimal note-taking API",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(notes_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "SimpleNotes API"}

    # Basic unprefixed liveness check
    @app.get("/health")
    async def basic_health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("simplenotes.main:app", host=settings.host, port=settings.port, reload=settings.reload)
