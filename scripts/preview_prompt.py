"""Print the prompt pair built for a product and scenario."""

from __future__ import annotations

import argparse
from typing import Sequence

from fashionistapp.catalog import Product, get_product
from fashionistapp.imggen import GenerationRequest, PromptResult, construct_prompt

SAMPLE_PRODUCT = Product(
    id="123",
    name="Silk Red Dress",
    description="A long elegant silk red dress with V-neck",
    price=299,
    image_url="test.jpg",
    category="Dresses",
)


def _format_result(result: PromptResult) -> str:
    return f"Positive: {result.positive}\nNegative: {result.negative}"


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--product-id", help="catalog product id; defaults to a sample dress")
    parser.add_argument(
        "--scenario",
        default="A romantic dinner at a rooftop in Mexico City",
    )
    parser.add_argument(
        "--model",
        default="Latina woman, brown hair, confident pose",
        help="model preferences",
    )
    args = parser.parse_args(argv)

    product = SAMPLE_PRODUCT
    if args.product_id:
        product = get_product(args.product_id)
        if product is None:
            parser.error(f"unknown product id: {args.product_id}")

    result = construct_prompt(
        GenerationRequest(
            product=product,
            user_scenario=args.scenario,
            model_preferences=args.model,
        ),
    )
    print(_format_result(result))


if __name__ == "__main__":
    main()
