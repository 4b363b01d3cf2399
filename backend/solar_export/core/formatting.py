"""Display helpers shared by templates and exporters."""

from __future__ import annotations

from datetime import datetime

DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def local_datetime(value: datetime) -> str:
    """Render ``value`` in the server's local time zone; naive values are taken as local."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(DISPLAY_DATETIME_FORMAT)


def parse_iso_instant(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
