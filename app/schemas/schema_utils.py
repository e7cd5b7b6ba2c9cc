"""Shared utilities for schema validation."""

from datetime import datetime, timezone
from typing import Any


def parse_mongo_datetime(v: Any) -> Any:
    """Normalize datetimes read back from MongoDB to timezone-aware UTC.

    Handles MongoDB Extended JSON ({'$date': '2024-11-01T08:00:00Z'}), which
    shows up when data is inserted via mongoimport, and the naive datetimes
    the driver returns for clients that are not tz_aware.
    """
    if isinstance(v, dict) and "$date" in v:
        v = datetime.fromisoformat(v["$date"].replace("Z", "+00:00"))
    if isinstance(v, datetime) and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    # Return as-is and let Pydantic handle validation
    return v
