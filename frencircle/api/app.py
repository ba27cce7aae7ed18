"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging in the worker process (so store INFO logs are visible with uvicorn --reload)
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from frencircle.api.state import AppState, get_state
from frencircle.config import FRENCIRCLE_USER_ID, FRENCIRCLE_WEB_ORIGIN, SUPABASE_URL

# Import routes after state to avoid circular imports
from frencircle.api.routes import circles, friends, notices

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not SUPABASE_URL:
        logger.warning("SUPABASE_URL is not set; every store call will fail")
    if not FRENCIRCLE_USER_ID:
        logger.warning("FRENCIRCLE_USER_ID is not set; friends will not be scoped to an owner")
    logger.info("Friend store: %s", SUPABASE_URL or "(unset)")
    yield


app = FastAPI(
    title="frencircle API",
    description="REST API for tracking best friends and work friends",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRENCIRCLE_WEB_ORIGIN] if FRENCIRCLE_WEB_ORIGIN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(friends.router, prefix="/api/friends", tags=["friends"])
app.include_router(circles.router, prefix="/api/circles", tags=["circles"])
app.include_router(circles.artists_router, prefix="/api/artists", tags=["artists"])
app.include_router(notices.router, prefix="/api/notices", tags=["notices"])
