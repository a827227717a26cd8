# roomsearch/exceptions.py
"""Error types raised along the search and ingestion paths."""


class RoomSearchError(Exception):
    """Base class for all service errors."""


class ValidationError(RoomSearchError):
    """Search filters failed shape, range or enum validation."""


class PersistenceError(RoomSearchError):
    """The database could not answer a query."""


class IngestionError(RoomSearchError):
    """Seeding the listings table from a CSV export failed."""
