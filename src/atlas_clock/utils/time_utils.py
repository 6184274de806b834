"""Time formatting helpers for clock display."""

from datetime import datetime, timedelta
from typing import Optional


def format_utc_offset(offset: Optional[timedelta]) -> str:
    """Format a UTC offset as ``+HH:MM`` / ``-HH:MM``.

    Args:
        offset: Offset from UTC, ``None`` is treated as zero

    Returns:
        Signed hours and minutes
    """
    total_seconds = int(offset.total_seconds()) if offset else 0
    sign = "-" if total_seconds < 0 else "+"
    hours, minutes = divmod(abs(total_seconds) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def format_clock_time(dt: datetime, with_fraction: bool = False) -> str:
    """Format ``HH:MM:SS``, optionally followed by hundredths (``.ff``)."""
    text = dt.strftime("%H:%M:%S")
    if with_fraction:
        text += f".{dt.microsecond // 10000:02d}"
    return text


def format_short_date(dt: datetime) -> str:
    """Format like ``Mon, Jan 02``."""
    return dt.strftime("%a, %b %d")


def format_long_date(dt: datetime) -> str:
    """Format like ``Monday, January 02, 2006``."""
    return dt.strftime("%A, %B %d, %Y")


def format_zone_caption(dt: datetime) -> str:
    """Format the zone abbreviation and offset, e.g. ``JST (UTC+09:00)``."""
    offset = format_utc_offset(dt.utcoffset())
    name = dt.tzname() or f"UTC{offset}"
    return f"{name} (UTC{offset})"
