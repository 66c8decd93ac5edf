"""
Production FastAPI Application

Repositories and the payment gateway are picked from settings
(DATA_ACCESS_MODE / PAYMENT_MODE) by the DI container.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import DataAccessMode
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = container.config_service()
    Logger.base.info(
        f'🚀 [Booking Service] Starting up (data={settings.DATA_ACCESS_MODE}, '
        f'payment={settings.PAYMENT_MODE})'
    )

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Booking Service] Dependency injection wired')

    # Fail fast on misconfigured gateway (e.g. external mode without a base URL)
    container.payment_gateway()

    if settings.DATA_ACCESS_MODE == DataAccessMode.SQL:
        await create_db_and_tables(container.database())
        Logger.base.info('🗄️  [Booking Service] Database ready')

    Logger.base.info('✅ [Booking Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Booking Service] Shutting down...')
    if settings.DATA_ACCESS_MODE == DataAccessMode.SQL:
        await container.database().dispose()

    container.unwire()
    Logger.base.info('👋 [Booking Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
