"""
Text normalization for intent matching: whitespace tokenization + Porter stemming.
"""

from textblob import Word

from services.errors import UnsupportedLanguageError

# Porter stemming is English only
SUPPORTED_LANGUAGES = ("en",)


def stem_token(token: str) -> str:
    """
    Fold a token to lower case and stem it until it stops changing.

    A single Porter pass is not idempotent ("agreed" -> "agre" -> "agr"),
    so the stemmer is re-applied until it reaches a fixed point.
    """
    word = token.lower()
    seen = set()
    while word not in seen:
        seen.add(word)
        word = Word(word).stem()
    return word


class Normalizer:
    """Turns raw text into the canonical key used for catalog lookups."""

    def __init__(self, language: str = "en"):
        if language not in SUPPORTED_LANGUAGES:
            raise UnsupportedLanguageError(language)
        self.language = language

    def normalize(self, text: str) -> str:
        if not text:
            return ""
        return " ".join(stem_token(token) for token in text.split())

    __call__ = normalize
