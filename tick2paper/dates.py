"""Timestamp parsing and TaskPaper date formatting."""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

log = logging.getLogger(__name__)


def parse_instant(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp as a UTC instant.

    TickTick writes UTC instants like ``2024-03-15T00:00:00.000+0000``.
    Naive values are taken to be UTC. Returns None if empty or invalid.
    """
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.strip())
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def _zone(name: str | None) -> ZoneInfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        log.debug("Unknown timezone %r", name)
        return None


def resolve_zone(zone_name: str | None, default_zone: str | None = None) -> tzinfo | None:
    """Zone to display times in.

    Falls back to *default_zone*, then to the system local zone (None).
    """
    return _zone(zone_name) or _zone(default_zone)


def format_date(
    instant: str | None, zone_name: str | None, default_zone: str | None = None
) -> str | None:
    """Format *instant* in *zone_name* as ``MM/DD/YYYY H:MM:SS AM``.

    The format is fixed and locale independent; OmniFocus parses it back.
    """
    dt = parse_instant(instant)
    if dt is None:
        return None
    try:
        local = dt.astimezone(resolve_zone(zone_name, default_zone))
    except OverflowError:
        return None
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month:02d}/{local.day:02d}/{local.year:04d} "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )
