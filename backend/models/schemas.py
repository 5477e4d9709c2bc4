"""
Pydantic response schemas for the API.
"""

from typing import List

from pydantic import BaseModel


# ── Chatbot ──────────────────────────────────────────────
class ChatbotResponse(BaseModel):
    answer: str


# ── Health ───────────────────────────────────────────────
class HealthResponse(BaseModel):
    status: str
    app: str
    version: str
    languages: List[str] = []
    catalog_entries: int = 0
