"""Composite match keys: normalized title + canonical start instant."""

from showsync.models.showtime import ShowtimeRecord
from showsync.normalization.timestamps import canonical_instant
from showsync.normalization.titles import normalize_title

# Normalized titles hold only word characters and single spaces.
KEY_SEPARATOR = "|"


def make_key(normalized_title: str, start_time: str) -> str:
    """Build the key two showtimes share iff they are the same showing.

    Raises MalformedTimestampError if ``start_time`` cannot be parsed.
    """
    return f"{normalized_title}{KEY_SEPARATOR}{canonical_instant(start_time, 'startTime')}"


def record_key(record: ShowtimeRecord) -> str:
    return make_key(normalize_title(record.movie_title), record.start_time)
