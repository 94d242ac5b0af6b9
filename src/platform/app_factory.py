"""
FastAPI app factory shared by src.main and the test app

The two differ only in lifespan and title; routes, CORS and exception
handlers are identical so API tests exercise the production surface.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.constant.route_constant import HEALTH
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.catalog.driving_adapter.http_controller.movie_controller import (
    router as movie_router,
)
from src.service.scheduling.driving_adapter.http_controller.showtime_controller import (
    router as showtime_router,
)


# Route constants carry full paths, so routers mount without a prefix
ROUTERS: tuple[tuple[APIRouter, str], ...] = (
    (movie_router, 'movie'),
    (showtime_router, 'showtime'),
    (booking_router, 'booking'),
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Theater scheduling and seat booking ledger',
) -> FastAPI:
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    for router, tag in ROUTERS:
        app.include_router(router, tags=[tag])

    @app.get(HEALTH, tags=['health'])
    async def health_check() -> dict[str, str]:
        """Liveness plus one round trip to the ledger database (503 if it is unreachable)."""
        async with container.database().session() as session:
            await session.execute(text('SELECT 1'))
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    return app
