"""Fiscal Code API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FiscalCodeError → structured JSON responses
    - CORS and route prefix configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers live in api/error_handlers.py and are registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fiscalcode.api.error_handlers import register_error_handlers
from fiscalcode.api.routes import fiscal_codes, health
from fiscalcode.config import get_settings
from fiscalcode.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Fiscal code API started")
    yield
    logger.info("Fiscal code API shutting down")


settings = get_settings()

app = FastAPI(
    title="Fiscal Code API", version=settings.service_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(fiscal_codes.router, prefix=settings.api_prefix)

register_error_handlers(app)
