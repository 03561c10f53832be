"""Datetime utilities."""

from datetime import date, datetime


def parse_datetime(value) -> datetime | None:
    """Parse an RFC 3339 / ISO 8601 value from front matter.

    Returns None for missing or unparseable values; drafts often carry
    placeholder dates.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def to_iso(value) -> str | None:
    """Normalise a front matter date to an ISO string for storage."""
    parsed = parse_datetime(value)
    return parsed.isoformat() if parsed is not None else None
