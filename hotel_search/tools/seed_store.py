"""Seed the hotel store from a CSV file.

Called by the application on startup when HOTELS_CSV_PATH is set. Can also
be run standalone to check a seed file:

Usage:
    python -m hotel_search.tools.seed_store data/hotels.csv
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from hotel_search.adapters.csv_loader.loader import load_hotels
from hotel_search.adapters.persistence.in_memory_hotel_repository import (
    InMemoryHotelRepository,
)
from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.domain.entities.hotel import Hotel
from hotel_search.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


async def seed_hotels(repo: HotelRepository, csv_path: Path) -> dict[str, int]:
    """Validate every CSV row into a Hotel and add it to *repo*.

    Invalid rows are logged and skipped; they never abort the seed.

    Returns:
        {"loaded": <stored rows>, "skipped": <rejected rows>}
    """
    rows = load_hotels(csv_path)
    loaded = skipped = 0

    for line_no, row in enumerate(rows, start=2):  # line 1 is the header
        if row["latitude"] is None or row["longitude"] is None:
            logger.warning("Row %d: missing coordinates, skipped", line_no)
            skipped += 1
            continue
        try:
            hotel = Hotel.create(
                row["name"],
                row["price_per_night"],
                float(row["latitude"]),
                float(row["longitude"]),
            )
        except (DomainError, ValueError) as e:
            logger.warning("Row %d: %s, skipped", line_no, e)
            skipped += 1
            continue

        await repo.add(hotel)
        loaded += 1

    logger.info("Seeded %d hotels from %s (%d skipped)", loaded, csv_path, skipped)
    return {"loaded": loaded, "skipped": skipped}


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate and load a hotels CSV")
    parser.add_argument("csv_path", type=Path, help="path to the hotels CSV file")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    if not args.csv_path.exists():
        logger.error("File not found: %s", args.csv_path)
        return 1

    counts = asyncio.run(seed_hotels(InMemoryHotelRepository(), args.csv_path))
    return 0 if counts["skipped"] == 0 else 2


if __name__ == "__main__":
    sys.exit(main())
