"""FastAPI application entrypoint.

All routes prefixed /v1. Auto-generated OpenAPI docs at /docs.

The translation orchestrator (MyMemory -> LibreTranslate -> offline
phrasebook) and the Redis-backed history store are created once during the
lifespan and stored on app.state for injection via Depends().
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from translator.api.v1.health import router as health_router
from translator.api.v1.history import router as history_router
from translator.api.v1.languages import router as languages_router
from translator.api.v1.translate import router as translate_router
from translator.core.config import settings
from translator.core.exceptions import TranslatorError
from translator.db.redis import RedisClient, create_redis
from translator.services.history.repository import HistoryRepository
from translator.services.history.store import HistoryStore
from translator.services.language.detector import LanguageDetector
from translator.services.orchestrator import TranslationOrchestrator
from translator.services.providers.libretranslate import LibreTranslateProvider
from translator.services.providers.mymemory import MyMemoryProvider
from translator.services.providers.offline import OfflineProvider


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    One shared httpx client serves both remote providers. Per-attempt
    deadlines are enforced by the orchestrator, not the client.
    """
    # --- Startup ---
    logger.info("app_startup", env=settings.app_env)

    http_client = httpx.AsyncClient()
    redis = RedisClient(create_redis(settings.redis_url))

    detector = LanguageDetector()
    app.state.detector = detector
    app.state.orchestrator = TranslationOrchestrator(
        providers=[
            MyMemoryProvider(
                http_client,
                url=settings.mymemory_url,
                max_text_length=settings.max_text_length,
                email=settings.mymemory_email,
            ),
            LibreTranslateProvider(
                http_client,
                url=settings.libretranslate_url,
                max_text_length=settings.max_text_length,
                api_key=settings.libretranslate_api_key,
            ),
        ],
        fallback=OfflineProvider(),
        detector=detector,
        attempt_timeout=settings.provider_timeout_seconds,
    )
    app.state.history_store = HistoryStore(
        HistoryRepository(redis, key=settings.history_key),
        capacity=settings.history_capacity,
    )

    if not await redis.ping():
        logger.warning("history_store_unreachable", redis_url=settings.redis_url)

    logger.info("app_providers_ready")
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")

    await http_client.aclose()
    await redis.close()


app = FastAPI(
    title="Translator API",
    description="Text translation with provider fallback and a bounded history.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if not settings.is_production else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TranslatorError)
async def translator_error_handler(
    request: Request, exc: TranslatorError
) -> JSONResponse:
    """Structured error response for all translator exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


app.include_router(health_router, prefix="/v1")
app.include_router(languages_router, prefix="/v1")
app.include_router(translate_router, prefix="/v1")
app.include_router(history_router, prefix="/v1")
