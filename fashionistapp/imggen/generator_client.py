"""Placeholder client standing in for the text-to-image provider."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from fashionistapp.config.settings import Settings, get_settings
from fashionistapp.imggen.prompt_builder import PromptResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratedImage:
    """Result of a generation call."""

    image_url: str
    prompt: PromptResult


class PlaceholderImageGenerator:
    """Simulates provider latency and returns a static placeholder image."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    async def generate(self, prompt: PromptResult) -> GeneratedImage:
        """Wait for the configured delay and return the placeholder URL."""

        delay = self._settings.generation_delay_seconds
        if delay > 0:
            await asyncio.sleep(delay)
        logger.debug("Placeholder image returned after %.2fs", delay)
        return GeneratedImage(image_url=self._settings.placeholder_image_url, prompt=prompt)

    async def close(self) -> None:
        """Nothing to release; mirrors the interface of real provider clients."""
