"""Read-only catalog routes."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fashionistapp.api.errors import error_response
from fashionistapp.catalog import get_product, list_categories, list_generations, list_products

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/products")
async def products(category: str | None = None) -> list[dict]:
    """List products, filtered by ``category`` unless it is empty or ``all``."""

    return [product.to_json() for product in list_products(category)]


@router.get("/products/{product_id}")
async def product_detail(product_id: str):
    product = get_product(product_id)
    if product is None:
        return error_response("Product not found", status.HTTP_404_NOT_FOUND)
    return JSONResponse(product.to_json())


@router.get("/categories")
async def categories() -> list[str]:
    return list_categories()


@router.get("/generations")
async def generations() -> list[dict]:
    """Sample editorials shown on the dashboard gallery."""

    return [record.to_json() for record in list_generations()]
