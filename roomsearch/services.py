# roomsearch/services.py
from sqlalchemy.orm import Session
from typing import Any, Mapping, Optional

from . import crud
from .filters import normalize_filters
from .query import build_query
from .refine import refine
from .schemas import SearchResult
from .utils import logger

SEARCH_ERROR_MESSAGE = "Failed to search room listings. Please try again later."

def search_room_listings(db: Session, filters: Optional[Mapping[str, Any]] = None) -> SearchResult:
    """Run one search and return a result; errors never reach the caller."""
    try:
        normalized = normalize_filters(filters)
        rows = crud.find_listings(db, build_query(normalized))
        listings = refine(rows, normalized)
        logger.info(
            "Search city=%r type=%s sort=%s price=[%s, %s]: %d of %d rows",
            normalized.city, normalized.type, normalized.sort_by,
            normalized.min_price, normalized.max_price, len(listings), len(rows),
        )
        return SearchResult.ok(listings)
    except Exception as e:
        logger.exception("Error searching room listings: %s", e)
        return SearchResult.fail(SEARCH_ERROR_MESSAGE)
