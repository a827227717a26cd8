# tests/test_crud.py
import pytest
from unittest import mock

from sqlalchemy.exc import IntegrityError

from roomsearch import crud
from roomsearch.exceptions import PersistenceError
from roomsearch.models import Listing


def row(title, **extra):
    data = {
        "title": title,
        "address": "1 Main St",
        "price": "1000",
        "bed_bath": "1bd/1ba",
        "unit_type": "Room",
        "availability": "Now",
        "listing_link": "https://example.com",
        "images": [],
        "amenities": ["Gym"],
    }
    data.update(extra)
    return data


def test_replace_listings_deletes_then_inserts(db, add_listing):
    add_listing(title="old")
    count = crud.replace_listings(db, [row("a"), row("b"), row("c")], batch_size=2)
    assert count == 3
    titles = sorted(x.title for x in db.query(Listing).all())
    assert titles == ["a", "b", "c"]
    stored = db.query(Listing).filter(Listing.title == "a").one()
    assert stored.amenities == ["Gym"]
    assert stored.id
    assert stored.created_at is not None


def test_replace_listings_rolls_back_on_failure(db, add_listing):
    add_listing(title="keep me")
    broken = row("broken")
    broken["title"] = None  # violates NOT NULL
    with pytest.raises(PersistenceError):
        crud.replace_listings(db, [row("ok"), broken], batch_size=1)
    assert [x.title for x in db.query(Listing).all()] == ["keep me"]


def test_replace_listings_rejects_bad_batch_size(db):
    with pytest.raises(ValueError):
        crud.replace_listings(db, [row("a")], batch_size=0)


def test_find_listings_wraps_driver_errors():
    session = mock.MagicMock()
    session.query.side_effect = IntegrityError("SELECT", {}, Exception("boom"))
    from roomsearch.filters import normalize_filters
    from roomsearch.query import build_query
    with pytest.raises(PersistenceError):
        crud.find_listings(session, build_query(normalize_filters()))


def test_list_all_listings_newest_first(db, add_listing):
    from datetime import datetime
    add_listing(title="older", created_at=datetime(2023, 1, 1))
    add_listing(title="newer", created_at=datetime(2024, 1, 1))
    assert [x.title for x in crud.list_all_listings(db)] == ["newer", "older"]
