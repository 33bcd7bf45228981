import asyncio
import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from src.admin.routers import router as admin_router
from src.config.database import init_db
from src.config.logging import setup_logging
from src.config.settings import settings
from src.errors import register_error_handlers
from src.media.routers import router as media_router
from src.memories.live import log_follower_exit, submission_feed, wall_view
from src.memories.routers import router as memories_router
from src.music.routers import router as music_router
from src.qr.routers import router as qr_router
from src.routers.healthz.router import router as healthz_router
from src.rsvp.routers import router as rsvp_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        logger.info("Running migrations")
        await init_db()

    follower = asyncio.create_task(wall_view.follow(submission_feed))
    follower.add_done_callback(log_follower_exit)
    yield
    submission_feed.close()
    follower.cancel()
    # a crash was already logged by the done-callback
    await asyncio.gather(follower, return_exceptions=True)


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Wedding Memories API",
    description="Blessing wall, RSVPs and admin dashboard for our wedding",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(media_router, tags=["Uploads"])
app.include_router(memories_router, tags=["Memories"])
app.include_router(rsvp_router, tags=["RSVP"])
app.include_router(music_router, tags=["Music"])
app.include_router(admin_router, tags=["Admin"])
app.include_router(qr_router, tags=["QR"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Wedding Memories API"}
