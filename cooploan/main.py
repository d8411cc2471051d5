"""Cooperative Loan API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CoopLoanError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Entity store initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers (api/error_handlers.py): CoopLoanError (domain),
      RequestValidationError (Pydantic), Exception (catch-all)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cooploan.api.error_handlers import register_error_handlers
from cooploan.infrastructure.memory_store import init_store
from cooploan.infrastructure.observability import setup_logging
from cooploan.config import get_settings
from cooploan.services.membership import bootstrap_admins
from cooploan.api.routes import (
    auth, contributions, health, loans, members, organizations,
    profits, repayments, reports, statistics,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store(bootstrap_admins(settings))
    logger.info("Cooperative loan API started")
    yield
    logger.info("Cooperative loan API shutting down")


app = FastAPI(
    title="Cooperative Loan API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(statistics.router)
app.include_router(organizations.router)
app.include_router(members.router)
app.include_router(loans.router)
app.include_router(repayments.router)
app.include_router(contributions.router)
app.include_router(profits.router)
app.include_router(reports.router)

register_error_handlers(app)
