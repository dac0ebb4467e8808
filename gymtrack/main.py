"""
FastAPI application.

Mounts the v1 API and, for SQLite databases (local development), creates
the tables on startup.  PostgreSQL deployments are migrated with Alembic.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from gymtrack.api.v1.router import api_router
from gymtrack.core.config import settings
from gymtrack.core.logger import setup_logger
from gymtrack.db.init_db import init_db

setup_logger(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
        init_db()
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Daily workout logging with routine editing.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {
        "message": "GymTrack API",
        "version": settings.VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Liveness probe."""
    return {
        "status": "healthy",
        "service": "gymtrack-api",
        "version": settings.VERSION
    }
