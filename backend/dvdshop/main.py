"""DVD Shop API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShopError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Parser, Calculator and Formatter come from api/dependencies.py, not module globals
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dvdshop import __version__
from dvdshop.api.error_handlers import register_error_handlers
from dvdshop.api.security_headers import register_security_headers
from dvdshop.api.routes import calculate, health
from dvdshop.config import get_settings
from dvdshop.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "DVD Shop API started",
        extra={"currency": settings.currency},
    )
    yield
    logger.info("DVD Shop API shutting down")


app = FastAPI(
    title="DVD Shop Calculator API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
register_security_headers(app)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(calculate.router)

register_error_handlers(app)
