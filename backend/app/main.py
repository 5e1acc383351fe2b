"""
FastAPI application entry point.
Assembles the app with routers, middleware, lifespan handlers, and exception handlers.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import settings
from app.core.exceptions import setup_exception_handlers
from app.core.logging import setup_logging
from app.core.rate_limit import limiter
from app.db import session as db_session
from app.db.init_db import create_tables
from app.deps.di_container import create_container


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    Opens the database engine and, in development, creates missing tables.
    """
    # Startup
    setup_logging()
    db_session.init_db()
    if settings.DB_CREATE_TABLES:
        await create_tables(db_session.engine)

    yield

    # Shutdown
    await db_session.close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Business services portal API",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Dependency injection container, owned by this app instance
    app.state.container = create_container(version=settings.VERSION)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting; 429s are rendered by the HTTP exception handler
    app.state.limiter = limiter

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Global exception handlers
    setup_exception_handlers(app)

    return app


app = create_app()
