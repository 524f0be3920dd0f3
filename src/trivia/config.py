from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from rest_core.config import ClientSettings

DEFAULT_API_URL = "http://jservice.io/api"


class TriviaSettings(BaseModel):
    """Settings for the trivia client, read once at startup."""

    api_url: str = Field(default=DEFAULT_API_URL)
    timeout: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Optional[str]) -> str:
        if not value:
            return "INFO"
        return str(value).strip().upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TriviaSettings":
        env = os.environ if environ is None else environ
        values = {
            "api_url": env.get("TRIVIA_API_URL"),
            "timeout": env.get("TRIVIA_API_TIMEOUT"),
            "log_level": env.get("TRIVIA_LOG_LEVEL"),
        }
        return cls(**{key: value for key, value in values.items() if value})

    def client_settings(self) -> ClientSettings:
        return ClientSettings(base_url=self.api_url, timeout=self.timeout, user_agent="trivia-client/0.1")
