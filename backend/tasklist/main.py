"""Task List API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskListError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Token signing and password hashing configured at startup; a bad signing
      key aborts startup with ConfigurationError
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasklist.api.dependencies import get_password_hasher, get_token_service
from tasklist.api.error_handlers import register_error_handlers
from tasklist.api.routes import auth, health, items, lists
from tasklist.config import get_settings
from tasklist.infrastructure.database import close_db, init_db
from tasklist.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    get_token_service()
    get_password_hasher()
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Task List API started")
    yield
    await close_db()
    logger.info("Task List API shutting down")


app = FastAPI(
    title="Task List API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(lists.router)
app.include_router(items.router)

register_error_handlers(app)
