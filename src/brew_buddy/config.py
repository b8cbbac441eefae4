"""Environment-driven settings for brew-buddy."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_BASE_URL = "http://localhost:8080"


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def normalize_base_url(value: str | None) -> str:
    """Strip whitespace and trailing slashes, falling back to the default address."""
    if not value or not value.strip():
        return DEFAULT_API_BASE_URL
    return value.strip().rstrip("/")


@dataclass(frozen=True)
class CatalogConfig:
    api_base_url: str = DEFAULT_API_BASE_URL
    source: str = "http"  # http|sample
    # Single oversized page standing in for real pagination.
    page_size: int = 1000
    request_timeout_sec: float = 10.0
    image_retry_limit: int = 2
    tag_frequency_limit: int = 10

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        return cls(
            api_base_url=normalize_base_url(os.getenv("BREW_BUDDY_API_BASE_URL")),
            source=(os.getenv("BREW_BUDDY_SOURCE", "http").strip().lower() or "http"),
            page_size=max(1, _safe_int(os.getenv("BREW_BUDDY_PAGE_SIZE"), 1000)),
            request_timeout_sec=max(0.1, _safe_float(os.getenv("BREW_BUDDY_REQUEST_TIMEOUT_SEC"), 10.0)),
            image_retry_limit=max(0, _safe_int(os.getenv("BREW_BUDDY_IMAGE_RETRY_LIMIT"), 2)),
            tag_frequency_limit=max(1, _safe_int(os.getenv("BREW_BUDDY_TAG_LIMIT"), 10)),
        )
