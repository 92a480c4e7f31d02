"""Tests for the try-on prompt builder."""

import pytest

from fashionistapp.catalog import Product
from fashionistapp.imggen.prompt_builder import (
    NEGATIVE_PROMPT,
    STYLE_PREFIX,
    GenerationRequest,
    build_garment_clause,
    build_scenario_clause,
    construct_prompt,
)


@pytest.fixture
def silk_dress() -> Product:
    return Product(
        id="123",
        name="Silk Red Dress",
        description="A long elegant silk red dress with V-neck",
        price=299,
        image_url="test.jpg",
        category="Dresses",
    )


def _request(product: Product, scenario: str, preferences: str) -> GenerationRequest:
    return GenerationRequest(product=product, user_scenario=scenario, model_preferences=preferences)


def test_prompt_matches_editorial_template(silk_dress: Product) -> None:
    result = construct_prompt(
        _request(
            silk_dress,
            "A romantic dinner at a rooftop in Mexico City",
            "Latina woman, brown hair, confident pose",
        ),
    )

    assert result.positive == (
        f"{STYLE_PREFIX} A fashion model (Latina woman, brown hair, confident pose) "
        "wearing the Silk Red Dress, described as: A long elegant silk red dress with V-neck. "
        "The fabric texture is palpable. stood in A romantic dinner at a rooftop in Mexico City, "
        "during golden hour sunset, dramatic rim lighting, warm cinematic tones."
    )
    assert "wearing the Silk Red Dress, described as: A long elegant silk red dress with V-neck" in result.positive
    assert result.positive.endswith(
        "Mexico City, during golden hour sunset, dramatic rim lighting, warm cinematic tones."
    )


def test_prompt_parts_appear_in_order(silk_dress: Product) -> None:
    result = construct_prompt(_request(silk_dress, "On a yacht in Capri", "tall man"))
    positive = result.positive

    positions = [
        positive.index(STYLE_PREFIX),
        positive.index("tall man"),
        positive.index(silk_dress.name),
        positive.index(silk_dress.description),
        positive.index("On a yacht in Capri"),
    ]
    assert positions == sorted(positions)
    assert positive.startswith(STYLE_PREFIX)


def test_negative_prompt_is_constant(silk_dress: Product) -> None:
    first = construct_prompt(_request(silk_dress, "Paris", "professional model"))
    second = construct_prompt(_request(silk_dress, "Tokyo street at night", "athletic woman"))

    assert first.negative == NEGATIVE_PROMPT
    assert second.negative == NEGATIVE_PROMPT


def test_prompt_is_deterministic(silk_dress: Product) -> None:
    request = _request(silk_dress, "A gallery opening in Berlin", "professional model")

    assert construct_prompt(request) == construct_prompt(request)


def test_empty_strings_still_produce_prompt() -> None:
    blank = Product(id="", name="", description="", price=0, image_url="", category="")

    result = construct_prompt(_request(blank, "", ""))

    assert result.positive.startswith(STYLE_PREFIX)
    assert "A fashion model () wearing the , described as: ." in result.positive
    assert result.negative == NEGATIVE_PROMPT


def test_clause_helpers(silk_dress: Product) -> None:
    assert build_garment_clause(silk_dress).endswith("The fabric texture is palpable.")
    assert build_scenario_clause("Lisbon") == (
        "Lisbon, during golden hour sunset, dramatic rim lighting, warm cinematic tones."
    )
