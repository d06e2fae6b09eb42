"""
Production FastAPI Application

uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, engine_manager
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Cinema Booking] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Cinema Booking] Dependency injection wired')

    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()

    Logger.base.info('✅ [Cinema Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Cinema Booking] Shutting down...')
    await engine_manager.dispose()
    Logger.base.info('🗄️  [Cinema Booking] Database engine disposed')

    container.unwire()
    Logger.base.info('👋 [Cinema Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
