"""Map raw marketplace items onto ``DatasetItem``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from bs4 import BeautifulSoup

from raise_datasets.models import DatasetItem

DATASET_BASE_URL = "https://portal.raise-science.eu/dataset-marketplace/"

_ORGANIZATION_KEYS = ("organization", "creator", "userId")


def strip_markup(text: str) -> str:
    """Drop every tag (and script/style bodies) and return trimmed plain text."""
    if not text:
        return ""
    soup = BeautifulSoup(text, "html.parser")
    for node in soup.find_all(["script", "style"]):
        node.decompose()
    return soup.get_text().strip()


def _as_text(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def dataset_link(item_id: str, base_url: str = DATASET_BASE_URL) -> str:
    if not item_id:
        return ""
    return base_url + quote(item_id, safe="")


def sanitize_item(raw: Any, *, base_url: str = DATASET_BASE_URL) -> DatasetItem:
    if not isinstance(raw, Mapping):
        return DatasetItem()

    item_id = _as_text(raw.get("id"))

    organization = ""
    for key in _ORGANIZATION_KEYS:
        if raw.get(key) is not None:
            organization = strip_markup(_as_text(raw[key]))
            break

    return DatasetItem(
        id=item_id,
        title=strip_markup(_as_text(raw.get("title"))),
        description=strip_markup(_as_text(raw.get("description"))),
        organization=organization,
        link=dataset_link(item_id, base_url),
    )
