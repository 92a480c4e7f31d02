"""Virtual try-on generation route."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from fashionistapp.api.dependencies import GenerationServiceDependency
from fashionistapp.api.errors import (
    error_response,
    internal_error_response,
    validation_error_response,
)
from fashionistapp.catalog.models import TryOnProduct
from fashionistapp.imggen.prompt_builder import GenerationRequest
from fashionistapp.metrics.prometheus_exporter import generation_requests_total
from fashionistapp.services.generation import GenerationService

logger = logging.getLogger(__name__)

DEFAULT_MODEL_PREFERENCES = "professional model"
MISSING_FIELDS_MESSAGE = "Missing required fields: product or userScenario"
INVALID_PRODUCT_MESSAGE = "Invalid product payload"

router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/generate")
async def generate(
    request: Request,
    service: GenerationService = GenerationServiceDependency,
) -> JSONResponse:
    """
    Build the editorial prompt for a product and return the generated image.

    Returns HTTP 400 when ``product`` or ``userScenario`` is missing or the product
    is malformed, and HTTP 500 for anything unexpected, including a body that is
    not valid JSON.
    """

    try:
        body = await request.json()
        if not isinstance(body, dict):
            body = {}

        raw_product = body.get("product")
        user_scenario = body.get("userScenario")
        if not raw_product or not user_scenario:
            generation_requests_total.labels(outcome="invalid").inc()
            return error_response(MISSING_FIELDS_MESSAGE, status.HTTP_400_BAD_REQUEST)

        if not isinstance(raw_product, dict):
            generation_requests_total.labels(outcome="invalid").inc()
            return error_response(INVALID_PRODUCT_MESSAGE, status.HTTP_400_BAD_REQUEST)

        try:
            product = TryOnProduct.model_validate(raw_product)
        except ValidationError as exc:
            generation_requests_total.labels(outcome="invalid").inc()
            return validation_error_response(INVALID_PRODUCT_MESSAGE, exc)

        generation_request = GenerationRequest(
            product=product,
            user_scenario=str(user_scenario),
            model_preferences=body.get("modelPreferences") or DEFAULT_MODEL_PREFERENCES,
        )
        result = await service.generate(generation_request)
    except Exception:
        logger.exception("Generation error")
        return internal_error_response()

    return JSONResponse(
        {
            "success": True,
            "imageUrl": result.image_url,
            "promptUsed": result.prompt.positive,
        },
    )
