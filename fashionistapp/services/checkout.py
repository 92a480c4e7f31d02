"""Cart pricing and simulated payment for the storefront checkout."""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from fashionistapp.catalog.models import Product
from fashionistapp.catalog.repository import get_product
from fashionistapp.config.settings import Settings, get_settings
from fashionistapp.metrics.prometheus_exporter import checkout_total

logger = logging.getLogger(__name__)


class CheckoutError(RuntimeError):
    """Base class for checkout failures caused by the submitted cart."""


class EmptyCartError(CheckoutError):
    def __init__(self) -> None:
        super().__init__("Cart is empty")


class ProductNotFoundError(CheckoutError):
    """Raised when a cart line references a product missing from the catalog."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class CartItem(BaseModel):
    """Single cart line submitted by the client."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId", min_length=1)
    quantity: int = Field(default=1, ge=1)


class CartPayload(BaseModel):
    items: list[CartItem] = Field(default_factory=list)


@dataclass(frozen=True, slots=True)
class OrderLine:
    product_id: str
    name: str
    unit_price: float
    quantity: int
    line_total: float

    def to_json(self) -> dict:
        return {
            "productId": self.product_id,
            "name": self.name,
            "unitPrice": self.unit_price,
            "quantity": self.quantity,
            "lineTotal": self.line_total,
        }


@dataclass(slots=True)
class OrderSummary:
    """Priced cart, optionally confirmed as an order."""

    lines: list[OrderLine]
    subtotal: float
    currency: str
    shipping: float = 0.0
    order_id: str | None = None
    payment_method: str | None = None

    @property
    def total(self) -> float:
        return round(self.subtotal + self.shipping, 2)

    def to_json(self) -> dict:
        payload = {
            "items": [line.to_json() for line in self.lines],
            "subtotal": self.subtotal,
            "shipping": self.shipping,
            "total": self.total,
            "currency": self.currency,
        }
        if self.order_id:
            payload["orderId"] = self.order_id
        if self.payment_method:
            payload["paymentMethod"] = self.payment_method
        return payload


class CheckoutService:
    """Prices carts against the catalog and simulates payment processing."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        product_lookup: Callable[[str], Product | None] = get_product,
    ) -> None:
        self._settings = settings or get_settings()
        self._product_lookup = product_lookup

    def quote(self, items: Sequence[CartItem]) -> OrderSummary:
        """Return cart totals without placing an order."""

        if not items:
            raise EmptyCartError()

        lines: list[OrderLine] = []
        for item in items:
            product = self._product_lookup(item.product_id)
            if product is None:
                raise ProductNotFoundError(item.product_id)
            lines.append(
                OrderLine(
                    product_id=product.id,
                    name=product.name,
                    unit_price=product.price,
                    quantity=item.quantity,
                    line_total=round(product.price * item.quantity, 2),
                ),
            )

        subtotal = round(sum(line.line_total for line in lines), 2)
        # Shipping is always free.
        return OrderSummary(lines=lines, subtotal=subtotal, currency=self._settings.currency)

    async def checkout(self, items: Sequence[CartItem]) -> OrderSummary:
        """
        Price the cart and confirm a mock payment.

        No payment gateway is contacted; the configured delay stands in for the
        processing time before the order is reported as successful.
        """

        try:
            summary = self.quote(items)
        except CheckoutError:
            checkout_total.labels(outcome="invalid").inc()
            raise

        delay = self._settings.checkout_delay_seconds
        if delay > 0:
            await asyncio.sleep(delay)

        summary.order_id = uuid.uuid4().hex
        summary.payment_method = "card ending in 4242"
        checkout_total.labels(outcome="success").inc()
        logger.info("Order %s confirmed, total %.2f %s", summary.order_id, summary.total, summary.currency)
        return summary
