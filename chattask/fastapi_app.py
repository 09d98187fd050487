"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- chats, chat messages/search, chat roles and permissions
- tasks, task statuses, user tasks
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from chattask.config.logging_config import NO_CORRELATION_ID, correlation_id_var, setup_logging
from chattask.config.settings import Config
from chattask.infrastructure.persistence.database import init_db
from chattask.infrastructure.persistence.seed import seed_reference_data
from chattask.presentation.api import ROUTERS
from chattask.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


async def prepare_database(container: AsyncContainer) -> None:
    """Create tables and seed reference data, as configured."""
    if Config.DATABASE_CREATE_TABLES:
        engine = await container.get(AsyncEngine)
        await init_db(engine)
    if Config.SEED_REFERENCE_DATA:
        session_factory = await container.get(async_sessionmaker[AsyncSession])
        await seed_reference_data(session_factory)


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; tests pass one built from fakes.
            When omitted, the production container is created and the
            database is prepared on startup.

    Returns:
        FastAPI application instance
    """
    use_database = container is None
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: prepare the database (production container only)
        - Shutdown: close DI container (engine, HTTP client, Kafka producer)
        """
        if use_database:
            await prepare_database(container)
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Chat & Task API",
        description="Chats with role-based permissions, messages and tasks",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.warning(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": jsonable_errors(errors)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {request.method} {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": f"Internal server error: {str(exc)}"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Literal-prefix routers first (see chattask.presentation.api)
    for router in ROUTERS:
        app.include_router(router)

    return app


def jsonable_errors(errors) -> list:
    """Pydantic error dicts may carry exception objects in 'ctx'."""
    return [
        {key: (str(value) if key == "ctx" else value) for key, value in error.items()}
        for error in errors
    ]


# Create the app instance
app = create_fastapi_app()
