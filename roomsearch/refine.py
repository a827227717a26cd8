# roomsearch/refine.py
"""In-memory price filtering and ordering of rows returned by the database.

Prices are stored as text, so the database can neither range-filter nor
sort them numerically. The rows are re-checked here and capped.
"""
import math

from .schemas import NormalizedFilters

RESULT_LIMIT = 10


def parse_price(value) -> float:
    """Return the numeric price, or 0 when it is not a finite non-negative number."""
    if value is None:
        return 0.0
    text = str(value).strip()
    # float() accepts "1_000"; listing prices never use digit separators
    if "_" in text:
        return 0.0
    try:
        number = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def is_within_price_range(listing, filters: NormalizedFilters) -> bool:
    price = parse_price(listing.price)
    return filters.min_price <= price <= filters.max_price


def _created_key(listing):
    created = listing.created_at
    if created is None:
        return float("-inf")
    return created.timestamp()


def sort_listings(listings, sort_by: str):
    if sort_by == "newest":
        return sorted(listings, key=_created_key, reverse=True)
    return sorted(listings, key=lambda x: parse_price(x.price), reverse=(sort_by == "price-desc"))


def refine(listings, filters: NormalizedFilters, limit: int = RESULT_LIMIT):
    in_range = [x for x in listings if is_within_price_range(x, filters)]
    return sort_listings(in_range, filters.sort_by)[:limit]
