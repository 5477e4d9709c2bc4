"""
Chatbot endpoints: greeting and symptom lookup.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from loguru import logger

from middleware.rate_limit import CHATBOT_RATE_LIMIT, limiter
from models.schemas import ChatbotResponse
from services.intent_catalog import IntentCatalog

router = APIRouter(tags=["chatbot"])


def get_catalog(request: Request) -> IntentCatalog:
    """FastAPI dependency returning the catalog built during startup."""
    return request.app.state.catalog


@router.get("/", response_class=PlainTextResponse)
async def index():
    return "Hello, world"


@router.get("/api/chatbot/{message}", response_model=ChatbotResponse)
@limiter.limit(CHATBOT_RATE_LIMIT)
async def chatbot(
    request: Request,
    message: str,
    catalog: IntentCatalog = Depends(get_catalog),
):
    answer = catalog.resolve(message)
    logger.info(f"Chatbot: '{message[:50]}' -> '{answer[:50]}'")
    return ChatbotResponse(answer=answer)
