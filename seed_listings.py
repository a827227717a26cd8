"""Replace the listings table with the rows of a CSV export.

Usage: python seed_listings.py [--file data/apartments.com-room-data.csv] [--no-display]
"""
from roomsearch.ingest import main

if __name__ == "__main__":
    raise SystemExit(main())
