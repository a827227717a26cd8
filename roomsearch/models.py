# roomsearch/models.py
"""SQLAlchemy ORM models for persisted entities.

Defines the `Listing` table searched by the tenant page and replaced
wholesale by the seeding script.
"""
import uuid
from sqlalchemy import Column, Text, JSON, TIMESTAMP, func, Index
from sqlalchemy.dialects.postgresql import JSONB
from .db import Base

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests)
JSONList = JSON().with_variant(JSONB(), "postgresql")


def _new_id():
    return str(uuid.uuid4())


class Listing(Base):
    __tablename__ = "listings"
    id = Column(Text, primary_key=True, default=_new_id)
    title = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    neighborhood = Column(Text)
    # kept as text: source exports carry values like "Contact for pricing"
    price = Column(Text, nullable=False)
    bed_bath = Column(Text, nullable=False)
    sqft = Column(Text)
    unit_type = Column(Text, nullable=False)
    availability = Column(Text, nullable=False)
    contact_name = Column(Text)
    contact_phone = Column(Text)
    listing_link = Column(Text, nullable=False)
    images = Column(JSONList, nullable=False, default=list)
    summary = Column(Text)
    amenities = Column(JSONList, nullable=False, default=list)
    notes_for_livva = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

Index("idx_listings_created_at", Listing.created_at)
Index("idx_listings_unit_type", Listing.unit_type)
