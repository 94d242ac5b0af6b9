"""
Production FastAPI Application

Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ledger] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ledger] Dependency injection wired')

    # Initialize database (fail-fast: a dead database aborts startup)
    database = container.database()
    await create_db_and_tables(database)
    Logger.base.info('🗄️  [Ledger] Database ready')

    Logger.base.info('✅ [Ledger] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Ledger] Shutting down...')

    await database.dispose()

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Ledger] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
