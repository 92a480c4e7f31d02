"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest


generation_requests_total = Counter(
    "generation_requests_total",
    "Total number of virtual try-on generation requests.",
    ["outcome"],
)

checkout_total = Counter(
    "checkout_total",
    "Total number of checkout attempts.",
    ["outcome"],
)


def render_latest() -> tuple[bytes, str]:
    """Return the exposition payload and its content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
