# roomsearch/ingest.py
"""Seed the listings table from an apartments.com CSV export.

The export is small and hand-edited, so lines are split with a quote-aware
regex rather than a full CSV dialect: a comma is a separator only when it is
followed by an even number of double quotes.
"""
import os
import re
import sys
import argparse
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .exceptions import IngestionError
from .utils import logger

load_dotenv()

DEFAULT_CSV_PATH = os.getenv("LISTINGS_CSV", "data/apartments.com-room-data.csv")
SEED_BATCH_SIZE = int(os.getenv("SEED_BATCH_SIZE", "100"))

CSV_SPLIT_RE = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')
NO_AMENITIES_RE = re.compile(r"no amenities", re.I)
SUMMARY_PREVIEW = 100

REQUIRED_DEFAULTS = {
    "title": "Untitled listing",
    "address": "Unknown address",
    "price": "Contact for pricing",
    "bed_bath": "Unknown configuration",
    "unit_type": "Room",
    "availability": "Check availability",
    "listing_link": "https://example.com",
}

OPTIONAL_FIELDS = ("neighborhood", "sqft", "contact_name", "contact_phone", "summary", "notes_for_livva")


def unquote(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) >= 2 and trimmed.startswith('"') and trimmed.endswith('"'):
        return trimmed[1:-1].replace('""', '"')
    return trimmed


def split_line(line: str) -> List[str]:
    return [unquote(part) for part in CSV_SPLIT_RE.split(line)]


def parse_csv(raw: str) -> List[Dict[str, str]]:
    lines = [line for line in re.split(r"\r?\n", raw) if line.strip()]
    if not lines:
        return []
    headers = split_line(lines[0])
    rows = []
    for line in lines[1:]:
        values = split_line(line)
        rows.append({h: (values[i] if i < len(values) else "").strip() for i, h in enumerate(headers)})
    return rows


def optional_field(value: Optional[str]) -> Optional[str]:
    trimmed = (value or "").strip()
    if not trimmed or trimmed == "--" or trimmed.lower() == "no phone listed":
        return None
    return trimmed


def required_field(value: Optional[str], fallback: str) -> str:
    trimmed = (value or "").strip()
    return trimmed or fallback


def parse_amenities(raw: Optional[str]) -> List[str]:
    normalized = (raw or "").strip()
    if not normalized or NO_AMENITIES_RE.search(normalized):
        return []
    return [entry.strip() for entry in normalized.split(",") if entry.strip()]


def map_row(row: Dict[str, str]) -> Dict[str, object]:
    """Map one CSV row to the column values of a ``Listing``."""
    listing = {name: required_field(row.get(name), fallback) for name, fallback in REQUIRED_DEFAULTS.items()}
    for name in OPTIONAL_FIELDS:
        listing[name] = optional_field(row.get(name))
    listing["amenities"] = parse_amenities(row.get("amenities"))
    listing["images"] = []
    return listing


def seed_listings(db, path, batch_size: int = SEED_BATCH_SIZE) -> int:
    """Replace every listing with the rows of the CSV at ``path``.

    Returns the number of listings written. An export without data rows
    leaves the table untouched.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise IngestionError(f"cannot read {path}: {e}") from e

    rows = parse_csv(raw)
    if not rows:
        logger.warning("No rows found in %s, nothing to seed.", path.name)
        return 0

    from . import crud

    listings = [map_row(row) for row in rows]
    count = crud.replace_listings(db, listings, batch_size=batch_size)
    logger.info("Seeded %d listing(s) from %s", count, path.name)
    return count


def format_listing(index: int, listing) -> List[str]:
    lines = [
        f"{index}. {listing.title}",
        f"   Address: {listing.address}",
        f"   Neighborhood: {listing.neighborhood or 'N/A'}",
        f"   Price: {listing.price}",
        f"   Bed/Bath: {listing.bed_bath}",
        f"   Sqft: {listing.sqft or 'N/A'}",
        f"   Unit Type: {listing.unit_type}",
        f"   Availability: {listing.availability}",
    ]
    if listing.contact_name:
        phone = f" - {listing.contact_phone}" if listing.contact_phone else ""
        lines.append(f"   Contact: {listing.contact_name}{phone}")
    lines.append(f"   Link: {listing.listing_link}")
    if listing.amenities:
        lines.append(f"   Amenities: {', '.join(listing.amenities)}")
    if listing.summary:
        summary = listing.summary
        if len(summary) > SUMMARY_PREVIEW:
            summary = summary[:SUMMARY_PREVIEW] + "..."
        lines.append(f"   Summary: {summary}")
    return lines


def display_listings(db, out=None):
    from . import crud

    out = out or sys.stdout
    listings = crud.list_all_listings(db)
    print("\n" + "=" * 80, file=out)
    print(f"DATABASE LISTINGS (Total: {len(listings)})", file=out)
    print("=" * 80 + "\n", file=out)
    if not listings:
        print("No listings found in database.", file=out)
        return
    for i, listing in enumerate(listings, start=1):
        for line in format_listing(i, listing):
            print(line, file=out)
        print("", file=out)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Replace all listings with the rows of a CSV export.")
    p.add_argument("--file", default=DEFAULT_CSV_PATH, help="path to the CSV export")
    p.add_argument("--batch-size", type=int, default=SEED_BATCH_SIZE)
    p.add_argument("--no-display", action="store_true", help="skip printing the seeded table")
    args = p.parse_args(argv)

    try:
        # db, crud and models are imported lazily so a missing DATABASE_URL is
        # reported like any other failure
        from .db import Base, SessionLocal, engine
        from . import models  # noqa: F401 register the listings table
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            seed_listings(db, args.file, batch_size=args.batch_size)
            if not args.no_display:
                display_listings(db)
        finally:
            db.close()
    except Exception as e:
        print(f"Seeding failed: {e}", file=sys.stderr)
        return 1
    return 0
