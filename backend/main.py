"""
Symptom Triage Chatbot — ASGI app and uvicorn runner.

The intent catalog is built inside the lifespan; a failed build aborts
startup so the API never serves requests without a trained catalog.
"""

import sys
import os

# Ensure backend dir is on path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from loguru import logger

from config import settings
from middleware.error_handler import global_exception_handler
from middleware.logging_middleware import logging_middleware
from middleware.rate_limit import limiter
from models.schemas import HealthResponse
from routes.chatbot import router as chatbot_router
from services.intent_catalog import IntentCatalog, build_catalog, load_intent_data

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)


def create_catalog() -> IntentCatalog:
    """Build the intent catalog from CATALOG_PATH or the built-in table."""
    intents = load_intent_data(settings.CATALOG_PATH) if settings.CATALOG_PATH else None
    return build_catalog(intents, language=settings.LANGUAGE, fallback=settings.FALLBACK_ANSWER)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} on port {settings.PORT}")
    try:
        app.state.catalog = create_catalog()
    except Exception:
        logger.exception("Error occurred while training the model")
        raise
    logger.info(f"Intent catalog ready with {len(app.state.catalog)} entries")
    yield
    logger.info("Shutting down")


def install_middleware(app: FastAPI):
    """Rate limiting, CORS, then error handling wrapped by request logging."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.middleware("http")(global_exception_handler)
    app.middleware("http")(logging_middleware)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Symptom triage chatbot backed by a static intent catalog",
    lifespan=lifespan,
)
install_middleware(app)
app.include_router(chatbot_router)


@app.get("/api/health", tags=["health"], response_model=HealthResponse)
async def health(request: Request):
    catalog: IntentCatalog = request.app.state.catalog
    return HealthResponse(
        status="ok",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        languages=catalog.languages,
        catalog_entries=len(catalog),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
