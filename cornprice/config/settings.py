import os
from functools import lru_cache

from pydantic import BaseModel, Field


class Settings(BaseModel):
    PORT: int = Field(default=4000, ge=1, le=65535)
    HOST: str = "0.0.0.0"
    QUOTE_SYMBOL: str = "ZC=F"
    QUOTE_URL: str = "https://query1.finance.yahoo.com/v7/finance/quote"
    UPSTREAM_TIMEOUT_SEC: float = 5.0
    POLL_INTERVAL_SEC: float = 5.0

    @classmethod
    def from_env(cls) -> "Settings":
        raw_port = os.getenv("PORT", "").strip()
        if not raw_port:
            return cls()
        return cls.model_validate({"PORT": raw_port})


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
