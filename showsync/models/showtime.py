"""Showtime record models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from showsync.models.enums import ShowtimeField, ShowtimeStatus

# Partner CSV column names, in the order partners send them.
CSV_COLUMNS: tuple[str, ...] = (
    "theater_name",
    "movie_title",
    "auditorium",
    "start_time",
    "end_time",
    "language",
    "format",
    "rating",
    "last_updated",
)

REQUIRED_COLUMNS: tuple[str, ...] = ("movie_title", "start_time")

# Fixed comparison order for field diffs. startTime is part of the match
# key and never diffed.
DIFF_FIELDS: tuple[ShowtimeField, ...] = (
    ShowtimeField.THEATER_NAME,
    ShowtimeField.MOVIE_TITLE,
    ShowtimeField.AUDITORIUM,
    ShowtimeField.END_TIME,
    ShowtimeField.LANGUAGE,
    ShowtimeField.FORMAT,
    ShowtimeField.RATING,
    ShowtimeField.LAST_UPDATED,
)

TIMESTAMP_FIELDS: frozenset[ShowtimeField] = frozenset({
    ShowtimeField.START_TIME,
    ShowtimeField.END_TIME,
    ShowtimeField.LAST_UPDATED,
})


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShowtimeRecord(_CamelModel):
    """Canonical showtime: trimmed text, timestamps as parseable text."""

    theater_name: str = ""
    movie_title: str = ""
    auditorium: str = ""
    start_time: str = ""
    end_time: str = ""
    language: str = ""
    format: str = ""
    rating: str = ""
    last_updated: str = ""


class ExistingShowtime(_CamelModel):
    """A showtime already held by the store, identified by its row id."""

    id: int
    record: ShowtimeRecord
    status: ShowtimeStatus = ShowtimeStatus.ACTIVE


class FieldDiff(_CamelModel):
    field: ShowtimeField
    old_value: str
    new_value: str


def field_value(record: ShowtimeRecord, field: ShowtimeField) -> str:
    """Return the value of ``field`` on ``record``."""
    match field:
        case ShowtimeField.THEATER_NAME:
            return record.theater_name
        case ShowtimeField.MOVIE_TITLE:
            return record.movie_title
        case ShowtimeField.AUDITORIUM:
            return record.auditorium
        case ShowtimeField.START_TIME:
            return record.start_time
        case ShowtimeField.END_TIME:
            return record.end_time
        case ShowtimeField.LANGUAGE:
            return record.language
        case ShowtimeField.FORMAT:
            return record.format
        case ShowtimeField.RATING:
            return record.rating
        case ShowtimeField.LAST_UPDATED:
            return record.last_updated
    raise ValueError(f"Unknown showtime field: {field}")
