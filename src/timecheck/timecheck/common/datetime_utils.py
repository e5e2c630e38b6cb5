from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from exc


def parse_hhmm(value, field_name: str) -> time:
    """Parse an ``HH:MM`` (or ``HH:MM:SS``) wall-clock time."""
    text = str(value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"{field_name} must be a time in HH:MM format")


def get_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown timezone: {name!r}") from exc


def now_local(tz_name: Optional[str] = None) -> datetime:
    """Current wall-clock time in the operating timezone, as a naive datetime.

    Note: Wrapped so tests can patch/mocked easier. Records store naive local times,
    so the business day is simply ``now_local(tz).date()``.
    """
    if not tz_name:
        return datetime.now()
    return datetime.now(get_zone(tz_name)).replace(tzinfo=None)
