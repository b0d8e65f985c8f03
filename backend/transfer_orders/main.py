"""Transfer Orders API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TransferOrdersError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Transfer store initialized on startup via lifespan context manager;
      its contents live and die with the process

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, wired here with one call
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transfer_orders.api.error_handlers import register_error_handlers
from transfer_orders.api.routes import health, transfers
from transfer_orders.config import get_settings
from transfer_orders.infrastructure.observability import setup_logging
from transfer_orders.infrastructure.transfer_store import init_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store(settings.initial_sequence)
    logger.info("Transfer Orders API started")
    yield
    logger.info("Transfer Orders API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(transfers.router)

register_error_handlers(app)
