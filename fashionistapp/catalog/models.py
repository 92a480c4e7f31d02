"""Pydantic models describing catalog entries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ShopTheLookItem(BaseModel):
    """Cross-sell item suggested next to a product."""

    item_name: str
    affiliate_url: str
    image_url: str


class TryOnProduct(BaseModel):
    """
    Product as submitted for a virtual try-on.

    Only ``name`` and ``description`` reach the prompt; the remaining catalog
    fields are accepted when present. Numeric ids sent by clients become strings.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, coerce_numbers_to_str=True)

    name: str
    description: str
    id: str | None = None
    price: float | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    category: str | None = None
    shop_the_look: list[ShopTheLookItem] | None = None

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Product(TryOnProduct):
    """Storefront product as listed in the catalog."""

    id: str
    price: float
    image_url: str = Field(alias="imageUrl")
    category: str


class GenerationRecord(BaseModel):
    """Previously generated editorial shown on the dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    image_url: str = Field(alias="imageUrl")
    prompt: str
    date: str
    likes: int = 0

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
