"""Locate the item list and total count in a marketplace response.

The marketplace has shipped several response layouts over time and none of
them is documented. Each layout is tried in a fixed order and the first
match wins; anything unrecognised yields an empty list instead of an error.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

_TOTAL_KEYS = ("total", "totalCount", "count")
_TOTAL_CONTAINERS = ("items", "successObject", "meta")


def _is_container(value: Any) -> bool:
    return isinstance(value, (list, Mapping))


def _as_list(value: Any) -> list[Any] | None:
    """Return the values of an array-like value, or ``None``.

    JSON lists qualify, and so do objects keyed ``"0"``, ``"1"``, ... in
    order, which some serializers emit for arrays.
    """
    if isinstance(value, list):
        return list(value)
    if isinstance(value, Mapping):
        for index, key in enumerate(value):
            if key != index and key != str(index):
                return None
        return list(value.values())
    return None


def _nested_list(container: Any, key: str) -> list[Any] | None:
    if isinstance(container, Mapping) and key in container:
        return _as_list(container[key])
    return None


def extract_items(payload: Any) -> list[Any]:
    """Return the raw items of ``payload``. The payload is never modified."""
    if isinstance(payload, Mapping):
        wrapper = payload.get("successObject")
        if _is_container(wrapper):
            found = _nested_list(wrapper, "items")
            if found is None:
                found = _as_list(wrapper)
            if found is not None:
                return found

        items = payload.get("items")
        if _is_container(items):
            for found in (
                _nested_list(items, "data"),
                _nested_list(items, "items"),
                _as_list(items),
            ):
                if found is not None:
                    return found

        data = payload.get("data")
        if _is_container(data):
            found = _nested_list(data, "items")
            if found is None:
                found = _as_list(data)
            # A keyed ``data`` object ends the search.
            return found if found is not None else []

        results = _as_list(payload.get("results"))
        if results is not None:
            return results

    if _is_container(payload) and len(payload) == 0:
        return []

    found = _as_list(payload)
    return found if found is not None else []


def _as_total(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return int(number) if math.isfinite(number) else None
    return None


def _total_in(container: Mapping) -> int | None:
    for key in _TOTAL_KEYS:
        total = _as_total(container.get(key))
        if total is not None:
            return total
    return None


def extract_total(payload: Any) -> int | None:
    """Return the total number of datasets when the payload reports one."""
    if not isinstance(payload, Mapping):
        return None

    total = _total_in(payload)
    if total is not None:
        return total

    for name in _TOTAL_CONTAINERS:
        container = payload.get(name)
        if isinstance(container, Mapping):
            total = _total_in(container)
            if total is not None:
                return total
    return None
