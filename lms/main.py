# lms/main.py

import logging
import asyncio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from contextlib import asynccontextmanager

from lms import __version__
from lms.adapters.configuration.config import settings
from lms.adapters.outbound.persistence.database import engine, get_db_context
from lms.adapters.outbound.persistence.models import Base
from lms.application.use_cases.auth_use_cases import AuthUseCases

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    logger.info("Application starting up...")

    # Create database tables if they don't exist
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.state.cleanup_task = None
    if settings.TOKEN_CLEANUP_ENABLED:
        app.state.cleanup_task = asyncio.create_task(
            periodic_cleanup(settings.TOKEN_CLEANUP_INTERVAL_SECONDS)
        )

    yield

    logger.info("Application shutting down...")
    if app.state.cleanup_task is not None:
        app.state.cleanup_task.cancel()
        try:
            await app.state.cleanup_task
        except asyncio.CancelledError:
            pass
    await engine.dispose()


# Create FastAPI instance
app = FastAPI(
    title="LMS",
    description="Academic periods, course schedules and token revocation",
    version=__version__,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Middlewares
from lms.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
)

# Exception mapping innermost so CORS headers and request logs cover error responses
app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AsyncRequestLoggingMiddleware)

# Routers
from lms.adapters.inbound.api.v1.router import api_router as api_v1_router

app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url="/docs")


# ── TOKEN BLACKLIST CLEANUP TASK ──────────────────────────────────────────────
async def cleanup_token_blacklist() -> int:
    """Cleans expired tokens from the blacklist in the database."""
    async with get_db_context() as db:
        return await AuthUseCases(db).cleanup_expired()


async def periodic_cleanup(interval_seconds: int):
    """Background task to periodically clean up expired tokens."""
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            await cleanup_token_blacklist()
        except asyncio.CancelledError:
            logger.info("Token cleanup task cancelled")
            break
        except Exception as e:
            logger.exception(f"Error in cleanup_token_blacklist: {e}")
