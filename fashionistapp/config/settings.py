"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_PLACEHOLDER_IMAGE_URL = (
    "https://placehold.co/1024x1024/1a1a1a/D4AF37?text=FashionistAPP+AI+Generated"
)


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised storefront settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    generation_delay_seconds: float = 2.0
    checkout_delay_seconds: float = 2.0
    placeholder_image_url: str = DEFAULT_PLACEHOLDER_IMAGE_URL

    currency: str = "USD"


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        generation_delay_seconds=float(os.getenv("GENERATION_DELAY_SECONDS", "2.0")),
        checkout_delay_seconds=float(os.getenv("CHECKOUT_DELAY_SECONDS", "2.0")),
        placeholder_image_url=os.getenv("PLACEHOLDER_IMAGE_URL", DEFAULT_PLACEHOLDER_IMAGE_URL),
        currency=os.getenv("CURRENCY", "USD"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
