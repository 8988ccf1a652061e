"""CSV loader — reads and normalizes hotel seed files."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from hotel_search.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    normalize_number,
)

logger = logging.getLogger(__name__)

NAME_COLUMNS = ("name", "hotel", "hotel_name")
PRICE_COLUMNS = ("price_per_night", "price", "pricepernight")
LATITUDE_COLUMNS = ("latitude", "lat")
LONGITUDE_COLUMNS = ("longitude", "lon", "lng")


def _sniff_dialect(sample: str) -> type[csv.Dialect] | csv.Dialect:
    """Detect the delimiter (comma/semicolon/tab) from the header line."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    counts = {d: first_line.count(d) for d in (";", ",", "\t")}
    best_delim = max(counts, key=counts.get)

    if counts[best_delim] > 0:
        class DynamicDialect(csv.excel):
            delimiter = best_delim
        return DynamicDialect

    return csv.excel


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Raises:
        ValueError: if the file has no header row.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = [
            {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            for raw_row in reader
        ]

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def _first(row: dict[str, str | None], columns: tuple[str, ...]) -> str | None:
    for col in columns:
        if row.get(col):
            return row[col]
    return None


def load_hotels(file_path: Path) -> list[dict[str, str | None]]:
    """Load the hotels CSV into raw row dicts.

    Expected columns (after normalization):
        name, price / price_per_night, latitude / lat, longitude / lon / lng

    Values are kept as strings (numbers with '.' decimals); validation
    happens when the rows are turned into Hotel entities.
    """
    hotels = []
    for row in _read_csv(file_path):
        hotels.append({
            "name": _first(row, NAME_COLUMNS),
            "price_per_night": normalize_number(_first(row, PRICE_COLUMNS)),
            "latitude": normalize_number(_first(row, LATITUDE_COLUMNS)),
            "longitude": normalize_number(_first(row, LONGITUDE_COLUMNS)),
        })
    logger.info("Parsed %d hotels", len(hotels))
    return hotels
