"""Turn raw listing parameters into a valid ``DatasetQuery``.

Pagination input is clamped, never rejected: a bad ``page`` or ``per_page``
from a browser should still produce a listing.
"""

from __future__ import annotations

import hashlib
import math
from typing import Any

from raise_datasets.config import MAX_PER_PAGE
from raise_datasets.models import DatasetQuery

DEFAULT_PER_PAGE = 10


def _coerce_int(value: Any) -> int | None:
    """Best-effort integer conversion; ``None`` when the value is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if math.isfinite(number) else None
    return None


def normalize_query(
    raw_search: Any = "",
    raw_page: Any = 1,
    raw_per_page: Any = DEFAULT_PER_PAGE,
    *,
    default_per_page: int = DEFAULT_PER_PAGE,
    max_per_page: int = MAX_PER_PAGE,
) -> DatasetQuery:
    search = "" if raw_search is None else str(raw_search).strip()

    page = _coerce_int(raw_page)
    if page is None or page < 1:
        page = 1

    per_page = _coerce_int(raw_per_page)
    if per_page is None or per_page < 1:
        per_page = default_per_page
    per_page = min(per_page, max_per_page)

    return DatasetQuery(search=search, page=page, per_page=per_page)


def cache_key(query: DatasetQuery) -> str:
    """Deterministic cache key for a query."""
    raw = "|".join([query.search, str(query.page), str(query.per_page)])
    return "raise_datasets_" + hashlib.md5(raw.encode("utf-8")).hexdigest()
