"""Ticket auto-assignment scheduler — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.adapters.persistence.database import engine
from app.config import settings
from app.infrastructure.api.routes_agents import router as agents_router
from app.infrastructure.api.routes_assignment import router as assignment_router
from app.infrastructure.api.routes_health import router as health_router

logging.basicConfig(level=settings.log_level, format="%(levelname)s | %(name)s | %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ticket auto-assignment scheduler",
        description="Assigns support tickets to eligible agents by specialization and load",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(assignment_router, prefix="/api")
    app.include_router(agents_router, prefix="/api")

    return app


app = create_app()
