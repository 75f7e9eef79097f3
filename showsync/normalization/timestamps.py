"""Timestamp canonicalization.

Every timestamp comparison and every match key goes through
``canonical_instant`` so that "2025-03-15T20:00:00Z",
"2025-03-15T20:00:00+00:00" and "2025-03-15 20:00:00" are the same instant.
"""

from datetime import datetime, timezone

from showsync.exceptions import MalformedTimestampError

# Tried in order when the value is not ISO 8601.
_FALLBACK_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%d %I:%M %p",
)


def parse_timestamp(value: str, field: str | None = None) -> datetime:
    """Parse timestamp text into an aware UTC datetime.

    Naive values are taken to be UTC. Raises MalformedTimestampError for
    blank or unparseable text.
    """
    stripped = value.strip()
    if not stripped:
        raise MalformedTimestampError(value, field)

    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(stripped)
    except ValueError:
        for fmt in _FALLBACK_FORMATS:
            try:
                parsed = datetime.strptime(stripped, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        raise MalformedTimestampError(value, field)
    try:
        return _as_utc(parsed)
    except OverflowError as exc:
        # Offsets at the edge of the datetime range cannot shift to UTC.
        raise MalformedTimestampError(value, field) from exc


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def canonical_instant(value: str | datetime, field: str | None = None) -> str:
    """Render a timestamp as UTC ISO 8601 with milliseconds, e.g. 2025-03-15T20:00:00.000Z."""
    instant = _as_utc(value) if isinstance(value, datetime) else parse_timestamp(value, field)
    return f"{instant:%Y-%m-%dT%H:%M:%S}.{instant.microsecond // 1000:03d}Z"


def canonical_or_empty(value: str, field: str | None = None) -> str:
    """Like canonical_instant, but blank text stays blank (optional fields)."""
    if not value.strip():
        return ""
    return canonical_instant(value, field)
