# tests/test_refine.py
from datetime import datetime
from types import SimpleNamespace

import pytest

from roomsearch.filters import normalize_filters
from roomsearch.refine import is_within_price_range, parse_price, refine, sort_listings


def row(price, created=None):
    return SimpleNamespace(price=price, created_at=created)


@pytest.mark.parametrize("value,expected", [
    ("1800", 1800.0),
    (" 2150.50 ", 2150.5),
    (1999, 1999.0),
    ("Contact for pricing", 0.0),
    ("", 0.0),
    (None, 0.0),
    ("nan", 0.0),
    ("inf", 0.0),
    ("-5", 0.0),
    ("1_000", 0.0),
])
def test_parse_price(value, expected):
    assert parse_price(value) == expected


def test_unparsable_price_ranks_as_zero():
    f = normalize_filters({"minPrice": 0, "maxPrice": 100})
    assert is_within_price_range(row("Contact for pricing"), f)
    assert not is_within_price_range(row("Contact for pricing"), normalize_filters({"minPrice": 1}))
    ordered = sort_listings([row("900"), row("ask"), row("100")], "price-asc")
    assert [r.price for r in ordered] == ["ask", "100", "900"]


def test_numeric_sort_beats_lexical_order():
    rows = [row("900"), row("1500"), row("10000"), row("2000")]
    assert [r.price for r in sort_listings(rows, "price-asc")] == ["900", "1500", "2000", "10000"]
    assert [r.price for r in sort_listings(rows, "price-desc")] == ["10000", "2000", "1500", "900"]


def test_newest_sorts_by_created_at_descending():
    rows = [row("1", datetime(2024, 1, 1)), row("2", datetime(2024, 3, 1)), row("3", None), row("4", datetime(2024, 2, 1))]
    assert [r.price for r in sort_listings(rows, "newest")] == ["2", "4", "1", "3"]


def test_refine_filters_range_and_caps_at_ten():
    rows = [row(str(p)) for p in range(100, 3000, 100)]
    result = refine(rows, normalize_filters({"minPrice": 500, "maxPrice": 2000}))
    assert len(result) == 10
    assert [parse_price(r.price) for r in result] == [float(p) for p in range(500, 1500, 100)]


def test_range_bounds_are_inclusive():
    f = normalize_filters({"minPrice": 1000, "maxPrice": 2000})
    assert [r.price for r in refine([row("999"), row("1000"), row("2000"), row("2001")], f)] == ["1000", "2000"]


def test_digit_separators_are_not_prices():
    f = normalize_filters({"minPrice": 500})
    assert not is_within_price_range(row("1_000"), f)
    assert is_within_price_range(row("1000"), f)
