"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import API_BASE, HEALTH, METRICS
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.restaurant.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from src.service.restaurant.driving_adapter.http_controller.availability_controller import (
    router as availability_router,
)
from src.service.restaurant.driving_adapter.http_controller.customer_controller import (
    router as customer_router,
)
from src.service.restaurant.driving_adapter.http_controller.reservation_controller import (
    router as reservation_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Restaurant table reservations',
    service_name: str = 'restaurant-api',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    tracing_config = TracingConfig(service_name=service_name)
    tracing_config.instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(reservation_router, prefix=API_BASE, tags=['reservation'])
    app.include_router(availability_router, prefix=API_BASE, tags=['availability'])
    app.include_router(customer_router, prefix=API_BASE, tags=['customer'])
    app.include_router(admin_router, prefix=API_BASE, tags=['admin'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get(f'{API_BASE}{HEALTH}', response_class=PlainTextResponse)
    async def health_check() -> str:
        return 'Restaurant API is running'

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
