# roomsearch/crud.py
"""Database access for `Listing` entities.

This is the only module that turns a :class:`~roomsearch.query.ListingQuery`
into SQL. Driver and SQL errors are re-raised as ``PersistenceError``.
"""
from sqlalchemy import and_, or_, func, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Sequence

from .exceptions import PersistenceError
from .models import Listing
from .query import AND, ASC, CONTAINS, IEQUALS, Clause, ListingQuery, Predicate

def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

def _clause_to_sql(clause: Clause):
    column = getattr(Listing, clause.field)
    if clause.operator == CONTAINS:
        return column.ilike(f"%{_escape_like(clause.value)}%", escape="\\")
    if clause.operator == IEQUALS:
        return func.lower(column) == clause.value.lower()
    raise ValueError(f"unsupported operator {clause.operator!r}")

def predicate_to_sql(predicate: Predicate):
    if predicate.is_empty():
        return true()
    parts = [
        predicate_to_sql(t) if isinstance(t, Predicate) else _clause_to_sql(t)
        for t in predicate.terms
    ]
    return and_(*parts) if predicate.combinator == AND else or_(*parts)

def find_listings(db: Session, query: ListingQuery) -> List[Listing]:
    order_by = [
        getattr(Listing, o.field).asc() if o.direction == ASC else getattr(Listing, o.field).desc()
        for o in query.ordering
    ]
    try:
        return (
            db.query(Listing)
            .filter(predicate_to_sql(query.predicate))
            .order_by(*order_by)
            .limit(query.limit)
            .all()
        )
    except SQLAlchemyError as e:
        raise PersistenceError("listing query failed") from e

def list_all_listings(db: Session) -> List[Listing]:
    return db.query(Listing).order_by(Listing.created_at.desc(), Listing.id).all()

def replace_listings(db: Session, rows: Sequence[Dict[str, Any]], batch_size: int = 100) -> int:
    """Delete every listing and insert ``rows`` in one transaction.

    Inserts are flushed ``batch_size`` rows at a time; any failure rolls the
    whole replace back, leaving the previous contents in place.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be positive")
    try:
        db.query(Listing).delete(synchronize_session=False)
        for start in range(0, len(rows), batch_size):
            db.add_all([Listing(**row) for row in rows[start:start + batch_size]])
            db.flush()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError("replacing listings failed") from e
    return len(rows)
