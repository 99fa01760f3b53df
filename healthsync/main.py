from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

import uvicorn

from healthsync.config.constants import API_VERSION
from healthsync.config.settings import settings
from healthsync.core.errors import register_exception_handlers
from healthsync.core.middleware import verify_token_middleware
from healthsync.core.models import get_biogpt_service, get_vision_service
from healthsync.db.base import get_engine, get_session_factory

# -------------------------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def log_provider_status():
    """Report which AI providers are fully configured."""
    biogpt = get_biogpt_service()
    if biogpt.limited_mode:
        logger.warning("BioGPT Service: LIMITED MODE (HUGGINGFACE_API_KEY not set)")
    else:
        logger.info("BioGPT Service: Fully Configured")

    if get_vision_service().configured:
        logger.info("OpenAI Vision Service: Fully Configured")
    else:
        logger.warning("OpenAI Vision Service: UNAVAILABLE (OPENAI_API_KEY not set)")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application start-up & shutdown hooks."""
    # ------------------------------------------------------------------ start‑up -----
    logger.info("Application startup …")

    engine = None
    try:
        logger.info("Initializing Database Engine...")
        engine = await get_engine(str(settings.database_url), pool_pre_ping=True)
        app.state.engine = engine
        app.state.session_factory = await get_session_factory(engine)
        logger.info("DB engine and session factory ready.")
    except Exception as e:
        logger.critical(
            f"CRITICAL ERROR DURING STARTUP INITIALIZATIONS: {e}", exc_info=True
        )
        if engine:
            await engine.dispose()
        raise

    log_provider_status()

    # ------------------------------------------------ give control back
    yield

    # ------------------------------------------------ shutdown --------
    logger.info("Application shutdown …")
    try:
        await engine.dispose()
        logger.info("DB engine disposed")
    except Exception:
        logger.exception("Error disposing DB engine")

    logger.info("Shutdown complete")


# -------------------------------------------------------------------------------------
# FastAPI application instance
# -------------------------------------------------------------------------------------
app = FastAPI(title="HealthSync API", version=API_VERSION, lifespan=lifespan)

# CORS -------------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o) for o in settings.cors_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(verify_token_middleware)

register_exception_handlers(app)


# ------------------------------------------------------------------- routes ---------
from healthsync.routes.ai.router import biogpt_router, openai_router  # noqa: E402  (after app creation)
from healthsync.routes.appointment.router import router as appointment_router  # noqa: E402
from healthsync.routes.auth.router import router as auth_router  # noqa: E402
from healthsync.routes.care.router import caretakers_router, doctors_router  # noqa: E402
from healthsync.routes.patients.router import router as patients_router  # noqa: E402
from healthsync.routes.system.router import index_router, router as system_router  # noqa: E402

app.include_router(index_router)
for api_router in (
    system_router,
    auth_router,
    patients_router,
    doctors_router,
    caretakers_router,
    appointment_router,
    biogpt_router,
    openai_router,
):
    app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run("healthsync.main:app", host=settings.host, port=settings.port)
