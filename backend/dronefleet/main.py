"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from dronefleet.api.router import api_router
from dronefleet.core.config import settings
from dronefleet.core.exceptions import setup_exception_handlers
from dronefleet.core.logging import setup_logging, get_logger
from dronefleet.db.init_db import create_tables, seed_initial_data
from dronefleet.deps.di_container import build_container

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Builds the DI container and owns the database lifecycle.
    """
    # Startup
    setup_logging()
    
    container = build_container()
    database = container.database()
    database.connect()
    
    if settings.DB_CREATE_TABLES:
        await create_tables(database)
    if settings.DB_SEED_ADDRESSES:
        await seed_initial_data(database)
    
    # Store container in app state for access in routes
    app.state.container = container
    logger.info("Application started", extra={"environment": settings.ENVIRONMENT})
    
    yield
    
    # Shutdown
    await database.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Drone delivery fleet management API",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    app.include_router(api_router, prefix=settings.API_PREFIX)
    
    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        """Banner showing the API is up."""
        return "Drone API is running!"
    
    setup_exception_handlers(app)
    
    return app


app = create_app()
