"""
Runtime settings for the triage chatbot, read from the environment or `.env`.
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Symptom Triage Chatbot"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    # Intent catalog
    LANGUAGE: str = "en"
    FALLBACK_ANSWER: str = "Sorry, I don't"
    CATALOG_PATH: str = ""  # JSON {"questions": [...], "answers": [...]}; empty = built-in table

    RATE_LIMIT_PER_MINUTE: int = 60

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def cors_origins(self) -> List[str]:
        """CORS_ORIGINS split on commas; "*" allows any origin."""
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
