"""Cart quote and mock checkout routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from fashionistapp.api.dependencies import CheckoutServiceDependency
from fashionistapp.api.errors import (
    error_response,
    internal_error_response,
    validation_error_response,
)
from fashionistapp.metrics.prometheus_exporter import checkout_total
from fashionistapp.services.checkout import (
    CartPayload,
    CheckoutError,
    CheckoutService,
    ProductNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["checkout"])


def _checkout_error_response(exc: CheckoutError) -> JSONResponse:
    if isinstance(exc, ProductNotFoundError):
        return error_response(str(exc), status.HTTP_404_NOT_FOUND)
    return error_response(str(exc), status.HTTP_400_BAD_REQUEST)


async def _parse_cart(request: Request) -> CartPayload:
    body = await request.json()
    return CartPayload.model_validate(body if isinstance(body, dict) else {})


@router.post("/cart/quote")
async def quote(
    request: Request,
    service: CheckoutService = CheckoutServiceDependency,
) -> JSONResponse:
    """Return cart totals for the cart drawer."""

    try:
        cart = await _parse_cart(request)
        summary = service.quote(cart.items)
    except ValidationError as exc:
        return validation_error_response("Invalid cart payload", exc)
    except CheckoutError as exc:
        return _checkout_error_response(exc)
    except Exception:
        logger.exception("Cart quote error")
        return internal_error_response()

    return JSONResponse(summary.to_json())


@router.post("/checkout")
async def checkout(
    request: Request,
    service: CheckoutService = CheckoutServiceDependency,
) -> JSONResponse:
    """Confirm the cart with a simulated payment."""

    try:
        cart = await _parse_cart(request)
        summary = await service.checkout(cart.items)
    except ValidationError as exc:
        checkout_total.labels(outcome="invalid").inc()
        return validation_error_response("Invalid cart payload", exc)
    except CheckoutError as exc:
        return _checkout_error_response(exc)
    except Exception:
        checkout_total.labels(outcome="error").inc()
        logger.exception("Checkout error")
        return internal_error_response()

    return JSONResponse({"success": True, **summary.to_json()})
