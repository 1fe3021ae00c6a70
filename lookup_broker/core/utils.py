"""
Total extraction helpers for upstream documents.

Upstream bodies are kept as loosely typed parsed JSON. Every field the broker
reads goes through one of these functions, which return a constant default
(None or a sentinel) instead of raising when the shape is not what we expect.
"""
import math
import re
from typing import Any

UNKNOWN = "Unknown"

# Leading ZIP followed by a ZIP+4 dash, a list separator or nothing
_ZIP_RE = re.compile(r"^\s*(\d{5})(?:[-;,\s]|$)")


def _get(doc: Any, key: str) -> Any:
    return doc.get(key) if isinstance(doc, dict) else None


def extract_postcode(doc: Any) -> str | None:
    """Nominatim reverse: {"address": {"postcode": "76102-1234", ...}}."""
    postcode = _get(_get(doc, "address"), "postcode")
    if isinstance(postcode, str) and postcode.strip():
        return postcode.strip()
    return None


def normalize_zip(postcode: str | None) -> str | None:
    """
    Keep the leading 5-digit ZIP of a ZIP, ZIP+4 or Nominatim postcode list
    ("76102;76103"). Anything else (non-US postcodes, partial codes) counts
    as no ZIP.
    """
    if not postcode:
        return None
    m = _ZIP_RE.match(postcode)
    return m.group(1) if m else None


def extract_population(table: Any) -> int | None:
    """
    Census API tables are [header_row, data_row, ...]; the requested
    population variable is the first column of the first data row.
    """
    if not isinstance(table, list) or len(table) < 2:
        return None
    row = table[1]
    if not isinstance(row, list) or not row:
        return None
    value = int_field(row[0])
    if value is None or value < 0:
        return None
    return value


def scale_population(raw: int, factor: float) -> int:
    """Dampen a tabulation-area count and round half up to an int."""
    return max(0, math.floor(raw * factor + 0.5))


def first_result(doc: Any) -> dict | None:
    """Geocodio: {"results": [{...}, ...]} -> first result or None."""
    results = _get(doc, "results")
    if isinstance(results, list) and results and isinstance(results[0], dict):
        return results[0]
    return None


def text_field(value: Any, default: str = UNKNOWN) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def int_field(value: Any) -> int | None:
    """Integers, integral floats and numeric strings; anything else is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(round(value)) if math.isfinite(value) else None
    if isinstance(value, str):
        s = value.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            return int_field(float(s))
        except ValueError:
            return None
    return None


def number_field(value: Any) -> int | float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        s = value.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            return number_field(float(s))
        except ValueError:
            return None
    return None
