"""CSV column normalization: BOM, stray spaces, decimal commas."""

from __future__ import annotations

import re


def normalize_column_name(name: str) -> str:
    """Normalize a CSV column name.

    - Removes BOM characters (\\ufeff)
    - Replaces runs of spaces / non-breaking spaces / dashes with one underscore
    - Lowercases
    - Strips anything that's not alphanumeric or underscore
    """
    name = name.replace("\ufeff", "").strip()
    name = re.sub(r"[\s\u00a0\-]+", "_", name)
    name = name.lower()
    return re.sub(r"[^\w]", "", name, flags=re.UNICODE)


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def _is_grouped(integer_part: str, separator: str) -> bool:
    """True for '1.234.567' style digit groups split by *separator*."""
    pattern = r"-?\d{1,3}(?:" + re.escape(separator) + r"\d{3})+"
    return re.fullmatch(pattern, integer_part) is not None


def normalize_number(value: str | None) -> str | None:
    """Turn '1 234,50', '1.234,50' or '1,234.50' into '1234.50'.

    When both '.' and ',' appear, the last one is the decimal separator and
    the other must group thousands. A single ',' alone is a decimal comma;
    a repeated separator alone must group thousands.

    Returns None for blanks and for separators that cannot be read
    unambiguously (e.g. '1,2,3' or '1.2.3,4').
    """
    value = clean_string(value)
    if value is None:
        return None
    value = value.replace("\u00a0", "").replace(" ", "")

    commas, dots = value.count(","), value.count(".")
    if commas and dots:
        decimal_sep = "," if value.rfind(",") > value.rfind(".") else "."
        thousands_sep = "." if decimal_sep == "," else ","
        if value.count(decimal_sep) > 1:
            return None
        integer_part, fraction = value.rsplit(decimal_sep, 1)
        if not _is_grouped(integer_part, thousands_sep):
            return None
        return integer_part.replace(thousands_sep, "") + "." + fraction

    if commas == 1:
        return value.replace(",", ".")
    if commas > 1 or dots > 1:
        separator = "," if commas else "."
        if not _is_grouped(value, separator):
            return None
        return value.replace(separator, "")
    return value
