"""
Static intent catalog: normalized question -> intent -> canned answer.
"""

import json
import os
import re
from typing import Dict, Iterable, Optional, Tuple

from loguru import logger
from pydantic import ValidationError

from models.intents import DEFAULT_INTENTS, IntentData
from services.errors import CatalogError, CatalogFrozenError
from services.normalizer import Normalizer

DEFAULT_FALLBACK = "Sorry, I don't"

INTENT_PREFIX = "intent_"
_INTENT_RE = re.compile(r"intent_(\d+)")


def intent_id(position: int) -> str:
    """Intent identifier for a 1-based load position."""
    return f"{INTENT_PREFIX}{position}"


class IntentCatalog:
    """
    Two-hop exact-match lookup built once at startup.

    Questions are registered under their normalized key and point to an
    intent; each intent points to one answer. After ``train()`` the catalog
    is frozen and safe to share between concurrent requests.
    """

    def __init__(self, normalizer: Optional[Normalizer] = None, fallback: str = DEFAULT_FALLBACK):
        self.normalizer = normalizer or Normalizer()
        self.fallback = fallback
        self._documents: Dict[str, str] = {}
        self._answers: Dict[str, str] = {}
        self._entry_count = 0
        self._trained = False

    @property
    def languages(self):
        return [self.normalizer.language]

    @property
    def trained(self) -> bool:
        return self._trained

    def __len__(self) -> int:
        return self._entry_count

    def _ensure_writable(self):
        if self._trained:
            raise CatalogFrozenError("Catalog is already trained and read-only")

    # ── Registration ─────────────────────────────────────
    def add_document(self, question: str, intent: str):
        """Map a question (by normalized key) to an intent. Last write wins."""
        self._ensure_writable()
        if not _INTENT_RE.fullmatch(intent):
            raise CatalogError(f"Malformed intent identifier '{intent}'")
        key = self.normalizer.normalize(question)
        previous = self._documents.get(key)
        if previous is not None and previous != intent:
            logger.debug(f"Question '{question}' overrides {previous} -> {intent}")
        self._documents[key] = intent

    def add_answer(self, intent: str, answer: str):
        self._ensure_writable()
        match = _INTENT_RE.fullmatch(intent)
        if not match:
            raise CatalogError(f"Malformed intent identifier '{intent}'")
        self._answers[intent] = answer
        self._entry_count = max(self._entry_count, int(match.group(1)))

    def load(self, entries: Iterable[Tuple[str, str]]) -> "IntentCatalog":
        """Register ordered (question, answer) pairs as intent_1 … intent_n."""
        count = 0
        for position, (question, answer) in enumerate(entries, start=1):
            intent = intent_id(position)
            self.add_document(question, intent)
            self.add_answer(intent, answer)
            count = position
        logger.info(f"Loaded {count} phrase entries into intent catalog")
        return self

    def train(self) -> "IntentCatalog":
        """Validate the tables and freeze the catalog."""
        self._ensure_writable()
        for key, intent in self._documents.items():
            if not self._answers.get(intent):
                raise CatalogError(f"Intent {intent} (question '{key}') has no answer")
        self._trained = True
        logger.info("Model trained successfully")
        return self

    # ── Resolution ───────────────────────────────────────
    def resolve(self, message: str) -> str:
        """Return the canned answer for ``message`` or the fallback text."""
        key = self.normalizer.normalize(message)

        intent = self._documents.get(key)
        if intent is None:
            logger.debug(f"No intent for '{key}'")
            return self.fallback

        match = _INTENT_RE.fullmatch(intent)
        if not match:
            logger.warning(f"Malformed intent '{intent}' for '{key}'")
            return self.fallback

        index = int(match.group(1))
        answer = self._answers.get(intent)
        if not 1 <= index <= self._entry_count or not answer:
            logger.warning(f"Intent {intent} is out of range ({self._entry_count} entries)")
            return self.fallback

        logger.debug(f"Resolved '{key}' -> {intent}")
        return answer


# ── Construction ─────────────────────────────────────────
def load_intent_data(path: str) -> IntentData:
    """Read a ``{"questions": [...], "answers": [...]}`` JSON file."""
    if not os.path.exists(path):
        raise CatalogError(f"Catalog file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return IntentData.model_validate(data)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file {path} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise CatalogError(f"Catalog file {path} is invalid: {e}") from e


def build_catalog(
    intents: Optional[IntentData] = None,
    language: str = "en",
    fallback: str = DEFAULT_FALLBACK,
) -> IntentCatalog:
    """Create, load and train a catalog. Raises CatalogError on any failure."""
    intents = intents or DEFAULT_INTENTS
    catalog = IntentCatalog(Normalizer(language), fallback=fallback)
    return catalog.load(intents.entries()).train()
