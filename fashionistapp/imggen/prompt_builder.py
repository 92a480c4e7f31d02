"""Prompt construction helpers for the virtual try-on image generation step."""

from __future__ import annotations

from dataclasses import dataclass

from fashionistapp.catalog.models import TryOnProduct

# Photographic quality; must stay identical between generations.
STYLE_PREFIX = (
    "A high-fashion editorial magazine cover photograph. Shot on medium format Hasselblad X2D, "
    "100MP. Cinematic color grading, rich textures, extremely sharp focus on garment. "
    "Shallow depth of field, beautiful bokeh background. Confident, powerful pose. "
    "8k resolution, highly detailed."
)

NEGATIVE_PROMPT = (
    "cartoon, anime, 3d render, video game, drawing, painting, low quality, amateur, blurry, "
    "grainy, deformed hands, ugly face, bad anatomy, plastic skin, mannequin look, "
    "studio backdrop, flat lighting."
)

LIGHTING_SUFFIX = ", during golden hour sunset, dramatic rim lighting, warm cinematic tones."


@dataclass(slots=True)
class GenerationRequest:
    """Product, scenario and model description submitted by the shopper."""

    product: TryOnProduct
    user_scenario: str
    model_preferences: str


@dataclass(frozen=True, slots=True)
class PromptResult:
    """Positive/negative prompt pair for a text-to-image provider."""

    positive: str
    negative: str


def build_garment_clause(product: TryOnProduct) -> str:
    return (
        f"wearing the {product.name}, described as: {product.description}. "
        "The fabric texture is palpable."
    )


def build_scenario_clause(user_scenario: str) -> str:
    return f"{user_scenario}{LIGHTING_SUFFIX}"


def construct_prompt(request: GenerationRequest) -> PromptResult:
    """
    Assemble the final prompt pair.

    The positive prompt is the style prefix, the subject clause, the garment clause
    and the scenario clause, in that order. The caller is responsible for validating
    ``product`` and ``user_scenario`` and for defaulting ``model_preferences``.
    """

    garment = build_garment_clause(request.product)
    scenario = build_scenario_clause(request.user_scenario)
    positive = (
        f"{STYLE_PREFIX} A fashion model ({request.model_preferences}) "
        f"{garment} stood in {scenario}"
    )
    return PromptResult(positive=positive, negative=NEGATIVE_PROMPT)
