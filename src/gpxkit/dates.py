"""Conversion between datetimes and GPX date strings."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"^\d{4}$")
_FRACTION_RE = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def parse_year(text: str | None) -> datetime | None:
    """Parse a ``YYYY`` year into midnight of January 1st, UTC.

    Returns None when the input is missing or malformed; never raises.
    """
    if text is None:
        return None
    value = text.strip()
    if not _YEAR_RE.match(value):
        logger.debug("Ignoring malformed year %r", text)
        return None
    year = int(value)
    if year < 1:
        logger.debug("Ignoring out-of-range year %r", text)
        return None
    return datetime(year, 1, 1, tzinfo=timezone.utc)


def format_year(value: datetime | None) -> str | None:
    """Format a datetime as a four digit year."""
    if value is None:
        return None
    return f"{value.year:04d}"


def parse_time(text: str | None) -> datetime | None:
    """Parse an ISO 8601 GPX timestamp into an aware UTC datetime.

    Accepted examples:
      - "2024-05-01T10:15:30Z"
      - "2024-05-01T10:15:30.250Z"
      - "2024-05-01T12:15:30+02:00"

    Naive timestamps are taken to be UTC. Missing or malformed input
    returns None.
    """
    if text is None:
        return None
    value = text.strip()
    if not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits.
    value = _FRACTION_RE.sub(_six_digit_fraction, value)
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        logger.debug("Ignoring malformed timestamp %r", text)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_time(value: datetime | None) -> str | None:
    """Format a datetime as a GPX UTC timestamp with a ``Z`` suffix."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    timespec = "microseconds" if value.microsecond else "seconds"
    return value.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


def _six_digit_fraction(match: re.Match[str]) -> str:
    return f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}"
