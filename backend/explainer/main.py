"""
Concept Explainer FastAPI Application Entry Point.

Run with: uvicorn explainer.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from explainer.config import get_settings, sanitize_error
from explainer.db.session import engine
from explainer.api.routes import (
    auth,
    checks,
    concepts,
    jobs,
    steps,
)

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown."""
    # Startup
    configure_logging()
    logger.info("%s starting (environment=%s)", settings.app_name, settings.environment)
    yield
    # Shutdown
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Concept authoring API: concepts, explanation steps, checks and generation jobs",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage failures are terminal for the request; hide driver details outside development."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": sanitize_error(exc, generic_message="A database error occurred.")},
    )


# Include routers
app.include_router(auth.router)
app.include_router(concepts.router)
app.include_router(steps.router)
app.include_router(checks.router)
app.include_router(jobs.router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
