"""Tests for listing query normalization."""

import pytest

from raise_datasets.datasets import cache_key, normalize_query
from raise_datasets.models import DatasetQuery


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("20", 20),
        (20, 20),
        ("50", 50),
        ("51", 50),
        (1000, 50),
        ("1", 1),
        ("0", 10),
        (-5, 10),
        ("abc", 10),
        ("", 10),
        (None, 10),
        (True, 10),
        ("12.9", 12),
    ],
)
def test_per_page_is_clamped(raw, expected):
    query = normalize_query("", 1, raw)
    assert query.per_page == expected
    assert 1 <= query.per_page <= 50


@pytest.mark.parametrize("raw", [0, -1, "-3", "0", "nope", None, ""])
def test_page_floors_at_one(raw):
    assert normalize_query("", raw, 10).page == 1


def test_page_accepts_numeric_strings():
    assert normalize_query("", " 7 ", 10).page == 7


def test_search_is_trimmed():
    assert normalize_query("  gene  ", 1, 10).search == "gene"
    assert normalize_query(None, 1, 10).search == ""
    assert normalize_query("   ", 1, 10).search == ""


def test_custom_default_and_ceiling():
    query = normalize_query("", 1, "bad", default_per_page=25, max_per_page=30)
    assert query.per_page == 25
    assert normalize_query("", 1, 40, max_per_page=30).per_page == 30


def test_skip_and_take():
    query = normalize_query("gene", 2, 20)
    assert query.skip == 20
    assert query.take == 20
    assert normalize_query("", 1, 10).skip == 0


def test_query_is_immutable():
    query = normalize_query("x", 1, 10)
    with pytest.raises(Exception):
        query.page = 3


def test_cache_key_is_deterministic():
    a = normalize_query("x", 1, 10)
    b = DatasetQuery(search="x", page=1, per_page=10)
    assert cache_key(a) == cache_key(b)
    assert cache_key(a).startswith("raise_datasets_")


def test_cache_key_differs_per_query():
    keys = {
        cache_key(normalize_query("x", 1, 10)),
        cache_key(normalize_query("x", 2, 10)),
        cache_key(normalize_query("x", 1, 20)),
        cache_key(normalize_query("y", 1, 10)),
    }
    assert len(keys) == 4
