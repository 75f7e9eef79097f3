"""Raw partner rows to canonical showtime records."""

from collections.abc import Mapping

from showsync.models.showtime import REQUIRED_COLUMNS, ShowtimeRecord

RawRow = Mapping[str, str | None]


def _text(raw: RawRow, column: str) -> str:
    return (raw.get(column) or "").strip()


def has_required_fields(raw: RawRow) -> bool:
    """True if every required column is non-blank after trimming."""
    return all(_text(raw, column) for column in REQUIRED_COLUMNS)


def clean_row(raw: RawRow) -> ShowtimeRecord:
    """Map snake_case columns onto a record; missing columns become empty text."""
    return ShowtimeRecord(
        theater_name=_text(raw, "theater_name"),
        movie_title=_text(raw, "movie_title"),
        auditorium=_text(raw, "auditorium"),
        start_time=_text(raw, "start_time"),
        end_time=_text(raw, "end_time"),
        language=_text(raw, "language"),
        format=_text(raw, "format"),
        rating=_text(raw, "rating"),
        last_updated=_text(raw, "last_updated"),
    )
