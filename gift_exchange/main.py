"""Gift Exchange API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GiftExchangeError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Room store initialized on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gift_exchange.api.error_handlers import register_error_handlers
from gift_exchange.api.routes import health, rooms, users
from gift_exchange.config import get_settings
from gift_exchange.infrastructure.observability import setup_logging
from gift_exchange.infrastructure.room_store import init_room_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_room_store()
    logger.info("Gift Exchange API started")
    yield
    logger.info("Gift Exchange API shutting down")


app = FastAPI(
    title="Gift Exchange API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(rooms.router)
app.include_router(users.router)

register_error_handlers(app)
