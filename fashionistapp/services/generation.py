"""Virtual try-on pipeline that couples prompt building with the image provider."""

from __future__ import annotations

import logging

from fashionistapp.imggen.generator_client import GeneratedImage, PlaceholderImageGenerator
from fashionistapp.imggen.prompt_builder import GenerationRequest, construct_prompt
from fashionistapp.metrics.prometheus_exporter import generation_requests_total

logger = logging.getLogger(__name__)


class GenerationService:
    """Coordinates prompt construction and submission to the generator."""

    def __init__(self, generator: PlaceholderImageGenerator) -> None:
        self._generator = generator

    async def generate(self, request: GenerationRequest) -> GeneratedImage:
        """Build the prompt for ``request`` and return the generated image."""

        prompt = construct_prompt(request)
        logger.info("Generating try-on image for %s", request.product.name)
        logger.info("Positive prompt: %s", prompt.positive)
        logger.info("Negative prompt: %s", prompt.negative)

        try:
            result = await self._generator.generate(prompt)
        except Exception:
            generation_requests_total.labels(outcome="error").inc()
            raise

        generation_requests_total.labels(outcome="success").inc()
        return result

    async def close(self) -> None:
        """Release the underlying image provider client."""

        await self._generator.close()
