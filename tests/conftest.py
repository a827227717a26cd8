# tests/conftest.py
import os
from datetime import datetime

# must be set before roomsearch.db is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest

from roomsearch.db import Base, engine, SessionLocal
from roomsearch.models import Listing


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    yield session
    session.rollback()
    session.query(Listing).delete()
    session.commit()
    session.close()


@pytest.fixture()
def add_listing(db):
    def _add(**overrides):
        data = {
            "title": "Sunny room",
            "address": "123 Valencia St, San Francisco, CA",
            "neighborhood": "Mission",
            "price": "1800",
            "bed_bath": "1bd/1ba",
            "unit_type": "Room",
            "availability": "Now",
            "listing_link": "https://www.apartments.com/listing/1",
            "images": [],
            "amenities": [],
            "created_at": datetime(2024, 1, 1, 12, 0, 0),
        }
        data.update(overrides)
        obj = Listing(**data)
        db.add(obj)
        db.commit()
        return obj
    return _add
