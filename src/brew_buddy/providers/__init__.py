"""Catalog providers for brew-buddy."""

from brew_buddy.providers.base import BeverageSource, ImageReferenceSource
from brew_buddy.providers.http import HttpCatalogClient
from brew_buddy.providers.sample import SAMPLE_BEVERAGES, SampleCatalog

__all__ = [
    "BeverageSource",
    "HttpCatalogClient",
    "ImageReferenceSource",
    "SAMPLE_BEVERAGES",
    "SampleCatalog",
]
