"""Tests for the virtual try-on generation endpoint."""

from __future__ import annotations

import pytest
import pytest_mock
from fastapi.testclient import TestClient

from fashionistapp.api.dependencies import get_generation_service
from fashionistapp.api.main import app
from fashionistapp.catalog import TryOnProduct
from fashionistapp.config.settings import DEFAULT_PLACEHOLDER_IMAGE_URL, get_settings
from fashionistapp.imggen.generator_client import PlaceholderImageGenerator
from fashionistapp.imggen.prompt_builder import STYLE_PREFIX, GenerationRequest, construct_prompt
from fashionistapp.services.generation import GenerationService

PRODUCT = {
    "id": "123",
    "name": "Silk Red Dress",
    "description": "A long elegant silk red dress with V-neck",
    "price": 299,
    "imageUrl": "test.jpg",
    "category": "Dresses",
}


@pytest.fixture(autouse=True)
def _setup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GENERATION_DELAY_SECONDS", "0")
    monkeypatch.delenv("PLACEHOLDER_IMAGE_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_generate_returns_prompt_and_placeholder(client: TestClient) -> None:
    response = client.post(
        "/api/generate",
        json={
            "product": PRODUCT,
            "userScenario": "A romantic dinner at a rooftop in Mexico City",
            "modelPreferences": "Latina woman, brown hair, confident pose",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["imageUrl"] == DEFAULT_PLACEHOLDER_IMAGE_URL
    assert body["promptUsed"].startswith(STYLE_PREFIX)
    assert "A fashion model (Latina woman, brown hair, confident pose)" in body["promptUsed"]
    assert body["promptUsed"].endswith(
        "Mexico City, during golden hour sunset, dramatic rim lighting, warm cinematic tones."
    )
    expected = construct_prompt(
        GenerationRequest(
            product=TryOnProduct.model_validate(PRODUCT),
            user_scenario="A romantic dinner at a rooftop in Mexico City",
            model_preferences="Latina woman, brown hair, confident pose",
        ),
    )
    assert body["promptUsed"] == expected.positive


@pytest.mark.parametrize("preferences", [None, ""])
def test_generate_defaults_model_preferences(client: TestClient, preferences: str | None) -> None:
    payload = {"product": PRODUCT, "userScenario": "Paris"}
    if preferences is not None:
        payload["modelPreferences"] = preferences

    response = client.post("/api/generate", json=payload)

    assert response.status_code == 200
    assert "A fashion model (professional model)" in response.json()["promptUsed"]


@pytest.mark.parametrize(
    "payload",
    [
        {"product": PRODUCT},
        {"product": PRODUCT, "userScenario": ""},
        {"userScenario": "Paris"},
        {"product": None, "userScenario": "Paris"},
        [],
    ],
)
def test_generate_rejects_missing_fields(client: TestClient, payload: object) -> None:
    response = client.post("/api/generate", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: product or userScenario"}


def test_generate_rejects_malformed_product(client: TestClient) -> None:
    response = client.post(
        "/api/generate",
        json={"product": {"name": "No description"}, "userScenario": "Paris"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid product payload"
    assert any(detail["loc"] == ["description"] for detail in body["details"])


def test_generate_reports_internal_error(
    client: TestClient,
    mocker: pytest_mock.MockerFixture,
) -> None:
    generator = mocker.Mock()
    generator.generate = mocker.AsyncMock(side_effect=RuntimeError("provider down"))
    app.dependency_overrides[get_generation_service] = lambda: GenerationService(generator)

    response = client.post("/api/generate", json={"product": PRODUCT, "userScenario": "Paris"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    generator.generate.assert_awaited_once()


def test_generate_invalid_json_is_internal_error(client: TestClient) -> None:
    response = client.post(
        "/api/generate",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_generate_uses_configured_placeholder(
    client: TestClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("PLACEHOLDER_IMAGE_URL", "https://cdn.test/generated.png")
    get_settings.cache_clear()

    response = client.post("/api/generate", json={"product": PRODUCT, "userScenario": "Paris"})

    assert response.json()["imageUrl"] == "https://cdn.test/generated.png"


@pytest.mark.parametrize(
    "product",
    [
        {**PRODUCT, "id": 123},
        {"name": "Silk Red Dress", "description": "A long elegant silk red dress with V-neck"},
    ],
)
def test_generate_accepts_partial_and_numeric_id_products(client: TestClient, product: dict) -> None:
    response = client.post("/api/generate", json={"product": product, "userScenario": "Paris"})

    assert response.status_code == 200
    assert (
        "wearing the Silk Red Dress, described as: A long elegant silk red dress with V-neck"
        in response.json()["promptUsed"]
    )


def test_generate_rejects_non_object_product(client: TestClient) -> None:
    response = client.post(
        "/api/generate",
        json={"product": "Silk Red Dress", "userScenario": "Paris"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid product payload"}


def test_generate_wraps_dependency_failures_in_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GENERATION_DELAY_SECONDS", "abc")
    get_settings.cache_clear()
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/api/generate", json={"product": PRODUCT, "userScenario": "Paris"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_generate_closes_image_provider(
    client: TestClient,
    mocker: pytest_mock.MockerFixture,
) -> None:
    close = mocker.patch.object(
        PlaceholderImageGenerator,
        "close",
        new=mocker.AsyncMock(return_value=None),
    )

    response = client.post("/api/generate", json={"product": PRODUCT, "userScenario": "Paris"})

    assert response.status_code == 200
    close.assert_awaited_once()
