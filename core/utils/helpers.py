"""
Restaurant utility functions
"""

from __future__ import annotations
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from bson import ObjectId


# Money

def to_fixed(value: Optional[float], precision: int = 2) -> Optional[float]:
    """Round half away from zero to ``precision`` decimal places.

    Goes through the decimal repr of the float so that values such as 9.995,
    stored as 9.99499..., still round up to 10.0.
    """
    if value is None:
        return None
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


# Time & identifiers

def utc_now() -> datetime:
    """Current UTC time truncated to whole seconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def new_identity() -> tuple[ObjectId, str]:
    """Generate a storage id and the business id derived from it."""
    oid = ObjectId()
    return oid, str(oid)


def parse_positive_int(
    raw: Optional[str], default: int, maximum: Optional[int] = None
) -> int:
    """Parse a query value, falling back to ``default`` when missing, invalid,
    below 1 or above ``maximum``."""
    try:
        value = int(raw) if raw is not None else default
    except (TypeError, ValueError):
        return default
    if value < 1 or (maximum is not None and value > maximum):
        return default
    return value


def parse_optional_int(raw: Optional[str]) -> Optional[int]:
    """Parse a query value, returning None when missing or invalid."""
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None
