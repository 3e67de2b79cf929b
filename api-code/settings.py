from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime configuration resolved from environment variables."""

    chat_api_key: Optional[str] = Field(
        default=None,
        alias="CHAT_API_KEY",
        description="Bearer token for the chat-completion provider.",
    )
    chat_api_url: str = Field(
        default="https://api.deepseek.com/v1/chat/completions",
        alias="CHAT_API_URL",
        description="Full URL of the OpenAI-compatible chat/completions endpoint.",
    )
    chat_model: str = Field(
        default="deepseek-chat",
        alias="CHAT_MODEL",
        description="Model identifier sent with every completion request.",
    )
    cors_allow_origins: str = Field(
        default="*",
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of origins allowed to call the relay.",
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(os.environ)

    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from environment variables."""
    return Settings.from_env()
