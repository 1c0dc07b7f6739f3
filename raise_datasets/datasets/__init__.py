"""Query normalization, payload extraction and item sanitizing."""

from .extract import extract_items, extract_total
from .query import cache_key, normalize_query
from .sanitize import sanitize_item, strip_markup

__all__ = [
    "cache_key",
    "extract_items",
    "extract_total",
    "normalize_query",
    "sanitize_item",
    "strip_markup",
]
