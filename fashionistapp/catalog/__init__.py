"""Product catalog backed by static mock data."""

from .models import GenerationRecord, Product, ShopTheLookItem, TryOnProduct
from .repository import get_product, list_categories, list_generations, list_products

__all__ = [
    "GenerationRecord",
    "Product",
    "ShopTheLookItem",
    "TryOnProduct",
    "get_product",
    "list_categories",
    "list_generations",
    "list_products",
]
