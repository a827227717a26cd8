# roomsearch/query.py
"""Translate normalized filters into a storage-independent query description.

The predicate is a tree of :class:`Clause` leaves joined by ``AND``/``OR``
nodes. Nothing here knows about SQL; ``crud.find_listings`` turns the tree
into a SQLAlchemy expression.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from .schemas import NormalizedFilters

AND = "and"
OR = "or"

CONTAINS = "contains"   # case-insensitive substring
IEQUALS = "iequals"     # case-insensitive equality

ASC = "asc"
DESC = "desc"

SEARCH_ROW_LIMIT = 50

UNIT_TYPE_MAP = {
    "studio": "Studio",
    "room": "Room",
    "apartment": "Apartment",
}

KEYWORD_FIELDS = ("address", "summary", "neighborhood")


@dataclass(frozen=True)
class Clause:
    field: str
    operator: str
    value: str


@dataclass(frozen=True)
class Predicate:
    combinator: str
    terms: Tuple[Union[Clause, "Predicate"], ...] = ()

    def is_empty(self) -> bool:
        return not self.terms


@dataclass(frozen=True)
class Ordering:
    field: str
    direction: str


@dataclass(frozen=True)
class ListingQuery:
    predicate: Predicate
    ordering: List[Ordering] = field(default_factory=list)
    limit: int = SEARCH_ROW_LIMIT


def build_predicate(filters: NormalizedFilters) -> Predicate:
    terms = []

    # city is matched against the whole street address
    if filters.city:
        terms.append(Clause("address", CONTAINS, filters.city))

    if filters.type != "all":
        terms.append(Clause("unit_type", IEQUALS, UNIT_TYPE_MAP[filters.type]))

    if filters.keyword:
        terms.append(Predicate(OR, tuple(Clause(f, CONTAINS, filters.keyword) for f in KEYWORD_FIELDS)))

    return Predicate(AND, tuple(terms))


def build_ordering(sort_by: str) -> List[Ordering]:
    if sort_by == "newest":
        primary = Ordering("created_at", DESC)
    else:
        # price is text in storage, so this is only a pre-sort
        primary = Ordering("price", ASC if sort_by == "price-asc" else DESC)
    return [primary, Ordering("id", ASC)]


def build_query(filters: NormalizedFilters) -> ListingQuery:
    return ListingQuery(
        predicate=build_predicate(filters),
        ordering=build_ordering(filters.sort_by),
        limit=SEARCH_ROW_LIMIT,
    )
