"""
Production FastAPI Application

Restaurant reservation API: schema checks on startup, engine disposal on shutdown.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_engine,
    verify_schema,
)
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
import src.service.restaurant.driven_adapter.model  # noqa: F401  (register ORM models)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Restaurant API] Starting up...')

    tracing = TracingConfig(service_name='restaurant-api')
    tracing.setup()
    Logger.base.info('📊 [Restaurant API] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Restaurant API] Dependency injection wired')

    engine = get_engine()
    tracing.instrument_sqlalchemy(engine=engine)
    Logger.base.info('🗄️  [Restaurant API] Database engine ready + instrumented')

    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
        Logger.base.info('🧱 [Restaurant API] Tables ensured')

    # Fail fast on a schema the repositories cannot decode
    if settings.VERIFY_SCHEMA_ON_STARTUP:
        await verify_schema()

    Logger.base.info(
        f'✅ [Restaurant API] Ready (strict booking mode: {settings.STRICT_BOOKING_MODE})'
    )

    yield

    Logger.base.info('🛑 [Restaurant API] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Restaurant API] Database engine disposed')

    tracing.shutdown()
    container.unwire()

    Logger.base.info('👋 [Restaurant API] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
