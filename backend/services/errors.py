"""
Domain errors raised while building the intent catalog.
"""


class CatalogError(Exception):
    """The intent catalog could not be built."""


class CatalogFrozenError(CatalogError):
    """Raised when registering documents or answers after training."""


class UnsupportedLanguageError(CatalogError):
    def __init__(self, language: str):
        super().__init__(f"Unsupported language '{language}'")
        self.language = language
