# roomsearch/filters.py
"""Validation and defaulting of user supplied search filters."""
from typing import Any, Mapping, Optional, Union

import pydantic

from .exceptions import ValidationError
from .schemas import NormalizedFilters, SearchFilters

DEFAULT_FILTERS = NormalizedFilters(
    min_price=0,
    max_price=5000,
    city="San Francisco",
    keyword="",
    type="all",
    sort_by="price-asc",
)


def format_string(value: Optional[str], fallback: str) -> str:
    if not value:
        return fallback
    trimmed = value.strip()
    return trimmed if trimmed else fallback


def parse_filters(raw: Union[Mapping[str, Any], SearchFilters, None]) -> SearchFilters:
    if isinstance(raw, SearchFilters):
        return raw
    try:
        return SearchFilters.model_validate(dict(raw or {}))
    except pydantic.ValidationError as e:
        raise ValidationError(f"invalid search filters ({e.error_count()} error(s))") from e


def normalize_filters(raw: Union[Mapping[str, Any], SearchFilters, None] = None) -> NormalizedFilters:
    """Validate ``raw`` and fill every missing field with its default.

    A minimum price above the maximum is swapped rather than rejected.
    Raises :class:`ValidationError` when the shape is wrong.
    """
    filters = parse_filters(raw)

    min_price = filters.min_price if filters.min_price is not None else DEFAULT_FILTERS.min_price
    max_price = filters.max_price if filters.max_price is not None else DEFAULT_FILTERS.max_price
    if min_price > max_price:
        min_price, max_price = max_price, min_price

    return NormalizedFilters(
        min_price=min_price,
        max_price=max_price,
        city=format_string(filters.city, DEFAULT_FILTERS.city),
        keyword=format_string(filters.keyword, DEFAULT_FILTERS.keyword),
        type=filters.type or DEFAULT_FILTERS.type,
        sort_by=filters.sort_by or DEFAULT_FILTERS.sort_by,
    )
