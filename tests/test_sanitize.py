"""Tests for mapping raw marketplace items onto ``DatasetItem``."""

import pytest

from raise_datasets.datasets import sanitize_item, strip_markup
from raise_datasets.datasets.sanitize import DATASET_BASE_URL
from raise_datasets.models import DatasetItem


def test_markup_is_stripped_and_id_coerced():
    item = sanitize_item({"title": "<b>Hi</b>", "id": 42})
    assert item == DatasetItem(
        id="42",
        title="Hi",
        description="",
        organization="",
        link=DATASET_BASE_URL + "42",
    )


@pytest.mark.parametrize("raw", [None, 7, "dataset", ["a", "b"], True])
def test_non_mapping_yields_empty_item(raw):
    item = sanitize_item(raw)
    assert item == DatasetItem()
    assert item.link == ""


def test_link_is_empty_without_id():
    item = sanitize_item({"title": "No id"})
    assert item.id == ""
    assert item.link == ""


def test_link_percent_encodes_id():
    item = sanitize_item({"id": "a b/c?d"})
    assert item.link == DATASET_BASE_URL + "a%20b%2Fc%3Fd"


def test_custom_base_url():
    item = sanitize_item({"id": "x1"}, base_url="https://example.org/d/")
    assert item.link == "https://example.org/d/x1"


def test_description_is_trimmed_plain_text():
    item = sanitize_item({"description": "  <p>Ocean <em>temperature</em> records</p>\n"})
    assert item.description == "Ocean temperature records"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"organization": "<i>CERN</i>", "creator": "Alice", "userId": 5}, "CERN"),
        ({"creator": " Alice ", "userId": 5}, "Alice"),
        ({"userId": 5}, "5"),
        ({"organization": None, "creator": "Bob"}, "Bob"),
        ({"organization": "", "creator": "Bob"}, ""),
        ({}, ""),
    ],
)
def test_organization_fallback_order(raw, expected):
    assert sanitize_item(raw).organization == expected


def test_integral_float_id():
    assert sanitize_item({"id": 42.0}).id == "42"


def test_strip_markup_drops_script_bodies():
    assert strip_markup("Safe<script>alert(1)</script> text") == "Safe text"


def test_strip_markup_keeps_plain_text():
    assert strip_markup("  plain  ") == "plain"
    assert strip_markup("") == ""
