"""
Production FastAPI Application

Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Webinar Service] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Webinar Service] Dependency injection wired')

    database = container.database()
    if settings.DEBUG:
        # Production schema is owned by Alembic
        await database.create_db_and_tables()
    Logger.base.info('🗄️  [Webinar Service] Database engine ready')

    Logger.base.info('✅ [Webinar Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Webinar Service] Shutting down...')

    await database.dispose()

    container.unwire()

    Logger.base.info('👋 [Webinar Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
