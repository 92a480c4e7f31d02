"""Logging configuration module."""

from __future__ import annotations

import logging

from fashionistapp.config.settings import Settings, get_settings

PACKAGE_LOGGER = "fashionistapp"


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure logging for the storefront.

    Records carry the deployment environment. The package logger level is set
    directly because ``basicConfig`` is a no-op when the hosting server has
    already installed root handlers.
    """

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=f"%(asctime)s | %(levelname)s | {settings.environment} | %(name)s | %(message)s",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
