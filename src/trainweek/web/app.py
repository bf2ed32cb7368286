"""FastAPI application for the trainweek API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from loguru import logger

from .. import __version__
from ..config import Settings, get_settings
from ..data.seed import seed_demo_data
from ..db import (
    InMemoryUserRepository,
    InMemoryWorkoutDayRepository,
    SQLiteUserRepository,
    SQLiteWorkoutDayRepository,
    init_db,
)
from ..errors import BadRequestError, TrainweekError
from ..logger import setup_logger
from ..schemas.common import validation_messages
from .routers import users, workout_days


def build_repositories(settings: Settings):
    """Create the user and workout day repositories for the configured backend."""
    if settings.storage == "memory":
        return InMemoryUserRepository(), InMemoryWorkoutDayRepository()
    db_path = settings.db_path
    return SQLiteUserRepository(db_path), SQLiteWorkoutDayRepository(db_path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    settings: Settings = app.state.settings

    # Startup: schema creation is idempotent
    if settings.storage == "sqlite":
        await init_db(settings.db_path)

    if settings.seed_demo_data:
        await seed_demo_data(app.state.user_repository, app.state.workout_day_repository)

    logger.info(f"trainweek API ready (storage={settings.storage})")
    yield


def register_exception_handlers(app: FastAPI) -> None:
    """Render domain and validation errors as JSON with the matching status."""

    @app.exception_handler(TrainweekError)
    async def handle_domain_error(request: Request, exc: TrainweekError):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        error = BadRequestError(validation_messages(exc.errors()))
        logger.info(f"{request.method} {request.url.path} -> 400: {error}")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    setup_logger(level=settings.log_level, log_file=settings.log_file)

    app = FastAPI(
        title="trainweek",
        description="Users and weekly workout plans",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    user_repository, workout_day_repository = build_repositories(settings)
    app.state.user_repository = user_repository
    app.state.workout_day_repository = workout_day_repository

    register_exception_handlers(app)

    # Include routers
    app.include_router(users.router)
    app.include_router(workout_days.router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Root redirect to the interactive docs."""
        return RedirectResponse(url="/docs", status_code=302)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
