"""ASGI entry point for the UserHub REST API.

``create_app`` wires settings, logging, CORS, error translation and the
versioned routers into a FastAPI instance. User endpoints live under
``/api/v1``; ``/health`` and ``/`` stay outside the version prefix.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userhub.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    describe_database_url,
)
from userhub.presentation.api.dependencies import get_engine
from userhub.presentation.api.exception_handlers import setup_exception_handlers
from userhub.presentation.api.routers import users_router
from userhub.presentation.api.schemas import HealthResponse
from userhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User records: create, read, update, delete.

**Rules:**
- `name` must not be blank
- `email` must be a well-formed address and unique across users
- `password` must be at least 3 characters; it is never returned
""",
    },
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Info", "description": "Service metadata and entry points."},
]


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Send log records to stdout once per process.

    ``userhub`` loggers follow ``level_name``; SQLAlchemy and aiosqlite are
    held at WARNING so SQL echo does not drown the request log.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("userhub").setLevel(level)

    for noisy in ("sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and release the pool on shutdown."""
    settings: Settings = app.state.settings
    engine = get_engine(settings.database_url, settings.database_echo)
    logger.info(
        "UserHub API v%s starting on %s",
        API_VERSION,
        describe_database_url(str(engine.url)),
    )
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Database refused the connection, aborting startup")
        raise SystemExit(1) from None

    yield

    logger.info("UserHub API shutting down")
    await engine.dispose()


def create_v1_router() -> APIRouter:
    """Collect every v1 router under one parent router."""
    v1 = APIRouter()
    v1.include_router(users_router, prefix="/users", tags=["Users"])
    return v1


def _register_meta_routes(app: FastAPI, settings: Settings) -> None:
    docs_path = "/docs" if settings.api_debug else None

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Report that the process is up."""
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """Describe the service and where its endpoints live."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": docs_path,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "users": f"{API_V1_PREFIX}/users",
            },
        }


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Parameters
    ----------
    settings
        Settings to use instead of the cached environment settings.

    Returns
    -------
    Ready-to-serve FastAPI instance.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    debug = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="A small CRUD service for **user** records.",
        version=API_VERSION,
        docs_url="/docs" if debug else None,
        redoc_url="/redoc" if debug else None,
        openapi_url="/openapi.json" if debug else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)
    _register_meta_routes(app, settings)

    return app


app = create_app()
