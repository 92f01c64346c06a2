from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

STATIC_DIR = Path(__file__).resolve().parents[3] / "frontend" / "static"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    static_dir: str = str(STATIC_DIR)
    cors_origins: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_prefix": "",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
