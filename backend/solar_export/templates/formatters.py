"""Cell formatters used by the reading templates.

Every formatter accepts any value and returns display text; missing or
malformed values collapse to ``MISSING`` so one bad record cannot abort an
export.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..core.formatting import local_datetime, parse_iso_instant
from ..exporters.base import CellFormatter

MISSING = "N/A"


def _as_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
        return number if number.is_finite() else None
    return None


def fixed(decimals: int) -> CellFormatter:
    """Round half up to ``decimals`` places, ``N/A`` when absent."""
    quantum = Decimal(1).scaleb(-decimals)

    def formatter(value: Any) -> str:
        number = _as_decimal(value)
        if number is None:
            return MISSING
        try:
            return str(number.quantize(quantum, rounding=ROUND_HALF_UP))
        except InvalidOperation:
            return f"{float(number):.{decimals}f}"

    return formatter


def _instant(value: Any) -> datetime | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return parse_iso_instant(value)
    if isinstance(value, (int, float)) and math.isfinite(value):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    return None


def timestamp(value: Any) -> str:
    """Epoch milliseconds (or a datetime / ISO string) as local date-time text."""
    instant = _instant(value)
    return local_datetime(instant) if instant is not None else MISSING
