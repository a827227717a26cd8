# roomsearch/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional
from datetime import datetime

UnitTypeFilter = Literal["studio", "room", "apartment", "all"]
SortBy = Literal["price-asc", "price-desc", "newest"]


class SearchFilters(BaseModel):
    """Raw, untrusted search parameters as they arrive from the query string."""
    min_price: Optional[float] = Field(None, alias="minPrice", ge=0, allow_inf_nan=False)
    max_price: Optional[float] = Field(None, alias="maxPrice", ge=0, allow_inf_nan=False)
    city: Optional[str] = Field(None, max_length=100)
    keyword: Optional[str] = Field(None, max_length=120)
    type: Optional[UnitTypeFilter] = None
    sort_by: Optional[SortBy] = Field(None, alias="sortBy")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        # empty form inputs come through as ""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class NormalizedFilters(BaseModel):
    min_price: float
    max_price: float
    city: str
    keyword: str
    type: UnitTypeFilter
    sort_by: SortBy

    model_config = ConfigDict(frozen=True)


class ListingOut(BaseModel):
    id: str
    title: str
    address: str
    neighborhood: Optional[str] = None
    price: str
    bed_bath: str
    sqft: Optional[str] = None
    unit_type: str
    availability: str
    contact_name: Optional[str] = None
    contact_phone: Optional[str] = None
    listing_link: str
    images: List[str] = []
    summary: Optional[str] = None
    amenities: List[str] = []
    notes_for_livva: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SearchResult(BaseModel):
    success: bool
    data: Optional[List[ListingOut]] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, listings):
        return cls(success=True, data=[ListingOut.model_validate(x) for x in listings])

    @classmethod
    def fail(cls, message: str):
        return cls(success=False, error=message)
