"""FastAPI app, CORS, error mapping and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from songkiosk.api.state import AppState, get_state
from songkiosk.config import API_PORT, CORS_ORIGINS
from songkiosk.core.errors import KioskError

# Import routes after state to avoid circular imports
from songkiosk.api.routes import health, payments, songs

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    logger.info("Song request kiosk API on port %s (queue: /api/songs/queue)", API_PORT)
    if not state.settings.is_configured:
        logger.warning("DATATRANS_API_KEY not configured. Payment will fail.")
    if not state.admin_secret_key:
        logger.warning("ADMIN_SECRET_KEY not set. DJ endpoints are locked.")

    yield

    state.close()


app = FastAPI(
    title="Song Request Kiosk API",
    description="Pay-to-request song queue for a live DJ (TWINT via Datatrans)",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KioskError)
async def kiosk_error_handler(request: Request, exc: KioskError):
    if exc.status_code >= 500:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(payments.router, prefix="/api", tags=["payments"])
app.include_router(songs.router, prefix="/api/songs", tags=["songs"])
app.include_router(health.router, prefix="/api/health", tags=["health"])
