"""Route dependencies that assemble request-scoped services."""

from collections.abc import AsyncIterator

from fastapi import Depends

from fashionistapp.config.settings import get_settings
from fashionistapp.imggen.generator_client import PlaceholderImageGenerator
from fashionistapp.services.checkout import CheckoutService
from fashionistapp.services.generation import GenerationService


async def get_generation_service() -> AsyncIterator[GenerationService]:
    """Yield the try-on pipeline and close its image provider after the request."""

    service = GenerationService(PlaceholderImageGenerator(get_settings()))
    try:
        yield service
    finally:
        await service.close()


def get_checkout_service() -> CheckoutService:
    return CheckoutService(get_settings())


GenerationServiceDependency = Depends(get_generation_service)
CheckoutServiceDependency = Depends(get_checkout_service)
