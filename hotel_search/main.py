"""Hotel Search — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_search.adapters.persistence.in_memory_hotel_repository import (
    InMemoryHotelRepository,
)
from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.config import Settings, settings as default_settings
from hotel_search.infrastructure.api.errors import install_exception_handlers
from hotel_search.infrastructure.api.routes_health import router as health_router
from hotel_search.infrastructure.api.routes_hotels import router as hotels_router
from hotel_search.infrastructure.api.routes_search import router as search_router
from hotel_search.tools.seed_store import seed_hotels

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    csv_path = app.state.settings.hotels_csv_path
    if csv_path:
        path = Path(csv_path)
        if path.exists():
            await seed_hotels(app.state.hotel_repo, path)
        else:
            logger.warning("HOTELS_CSV_PATH %s does not exist, starting empty", path)
    logger.info("Hotel store ready with %d hotels", await app.state.hotel_repo.count())
    yield
    logger.info("Shutting down, in-memory store discarded")


def create_app(
    settings: Settings | None = None,
    hotel_repo: HotelRepository | None = None,
) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="Hotel Search API",
        description="Hotels ranked by combined price and distance from a point",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Process-wide store; every request reaches it through app.state
    app.state.settings = settings
    app.state.hotel_repo = hotel_repo if hotel_repo is not None else InMemoryHotelRepository()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_exception_handlers(app)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(hotels_router, prefix="/api/v1")
    app.include_router(search_router, prefix="/api/v1")

    return app


app = create_app()
