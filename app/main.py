"""
FastAPI Main Application
Portfolio analytics API over the stored holdings
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

from app.config import settings
from app.core.logging import setup_logging
from app.infrastructure.db.database import init_db, close_db
from app.api.routes import health, portfolio

# Configure logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Creates tables on startup, disposes the engine on shutdown
    """
    logger.info("🚀 Starting Portfolio Analytics API")

    await init_db()
    logger.info("✅ Database initialized")
    logger.info(f"   ✅ API Server: http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info(f"   ✅ API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")

    yield

    logger.info("📊 Closing database connections...")
    await close_db()
    logger.info("👋 Portfolio Analytics API shutdown complete")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Portfolio Analytics API",
        description="Holdings, allocation, performance and activity for a stock portfolio",
        version="1.0.0",
        lifespan=lifespan
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(portfolio.router, prefix="/api/portfolio", tags=["Portfolio"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
