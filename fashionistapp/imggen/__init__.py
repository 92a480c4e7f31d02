"""Prompt building and image generation utilities."""

from .generator_client import GeneratedImage, PlaceholderImageGenerator
from .prompt_builder import (
    NEGATIVE_PROMPT,
    STYLE_PREFIX,
    GenerationRequest,
    PromptResult,
    construct_prompt,
)

__all__ = [
    "GeneratedImage",
    "GenerationRequest",
    "NEGATIVE_PROMPT",
    "PlaceholderImageGenerator",
    "PromptResult",
    "STYLE_PREFIX",
    "construct_prompt",
]
