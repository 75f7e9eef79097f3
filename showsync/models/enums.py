"""Enumerations for ShowSync."""

from enum import StrEnum


class ShowtimeStatus(StrEnum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class ShowtimeField(StrEnum):
    """Every attribute of a showtime record, by its wire (camelCase) name."""

    THEATER_NAME = "theaterName"
    MOVIE_TITLE = "movieTitle"
    AUDITORIUM = "auditorium"
    START_TIME = "startTime"
    END_TIME = "endTime"
    LANGUAGE = "language"
    FORMAT = "format"
    RATING = "rating"
    LAST_UPDATED = "lastUpdated"


class TimestampPolicy(StrEnum):
    """What reconciliation does with a row whose timestamps cannot be parsed."""

    SKIP = "skip"
    ABORT = "abort"


class ApplyFailureReason(StrEnum):
    NOT_FOUND = "not_found"
    CHANGED = "changed"
    ERROR = "error"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"
