"""Static in-memory catalog used by the storefront."""

from __future__ import annotations

from typing import Sequence

from fashionistapp.catalog.models import GenerationRecord, Product, ShopTheLookItem

ALL_CATEGORIES = "all"

MOCK_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Beige Lounge Pants",
        description=(
            "Ultra-comfortable beige wide-leg lounge pants with a drawstring waist. "
            "Perfect for a relaxed yet chic look."
        ),
        price=89.99,
        image_url="/images/beige-pants.jpg",
        category="Bottoms",
        shop_the_look=[
            ShopTheLookItem(
                item_name="White Crop Top",
                affiliate_url="#",
                image_url="https://placehold.co/200x200/ffffff/000000?text=Crop+Top",
            ),
        ],
    ),
    Product(
        id="2",
        name="Sheer Black Tights",
        description=(
            "Premium sheer black tights with a fleece lining for warmth and style. "
            "A winter wardrobe essential."
        ),
        price=45.00,
        image_url="/images/black-tights.jpg",
        category="Accessories",
    ),
    Product(
        id="3",
        name="Noir Striped Knit Top",
        description=(
            "Elegant black short-sleeve knit top with delicate white horizontal stripes "
            "and textured detailing."
        ),
        price=65.00,
        image_url="/images/black-striped-top.jpg",
        category="Tops",
    ),
    Product(
        id="4",
        name="Ivory Striped Knit Top",
        description=(
            "Classic ivory short-sleeve knit top with black horizontal stripes. "
            "A versatile piece for any occasion."
        ),
        price=65.00,
        image_url="/images/white-striped-top.jpg",
        category="Tops",
    ),
    Product(
        id="5",
        name="Rose Textured Tee",
        description=(
            "Soft pink textured t-shirt with a relaxed fit. "
            "Adds a subtle pop of color and texture to your outfit."
        ),
        price=55.00,
        image_url="/images/pink-textured-top.jpg",
        category="Tops",
    ),
)

MOCK_GENERATIONS: tuple[GenerationRecord, ...] = (
    GenerationRecord(
        id="1",
        image_url="/images/gen-editorial-1.jpg",
        prompt="Editorial shot in Paris at sunset",
        date="2023-10-25",
        likes=124,
    ),
    GenerationRecord(
        id="2",
        image_url="/images/gen-editorial-2.jpg",
        prompt="Studio lighting, high contrast",
        date="2023-10-24",
        likes=89,
    ),
    GenerationRecord(
        id="3",
        image_url="/images/gen-editorial-1.jpg",
        prompt="Urban chic style in Tokyo",
        date="2023-10-23",
        likes=256,
    ),
)


def list_products(category: str | None = None) -> list[Product]:
    """Return catalog products, optionally narrowed to one category."""

    if not category or category.lower() == ALL_CATEGORIES:
        return list(MOCK_PRODUCTS)
    wanted = category.lower()
    return [product for product in MOCK_PRODUCTS if product.category.lower() == wanted]


def get_product(product_id: str) -> Product | None:
    for product in MOCK_PRODUCTS:
        if product.id == product_id:
            return product
    return None


def list_categories(products: Sequence[Product] = MOCK_PRODUCTS) -> list[str]:
    """Distinct categories in the order they first appear."""

    seen: list[str] = []
    for product in products:
        if product.category not in seen:
            seen.append(product.category)
    return seen


def list_generations() -> list[GenerationRecord]:
    return list(MOCK_GENERATIONS)
