"""Shared test fixtures for ShowSync."""

import pytest

from showsync.db.repository import ShowtimeRepository
from showsync.db.schema import create_schema
from showsync.models.showtime import ExistingShowtime, ShowtimeRecord


def make_raw_row(**overrides: str) -> dict[str, str]:
    """A partner CSV row for the 20:00 Dune showing, with overrides."""
    row = {
        "theater_name": "Downtown Cinema 7",
        "movie_title": "Dune: Part Two",
        "auditorium": "Auditorium 1",
        "start_time": "2025-03-15T20:00:00Z",
        "end_time": "2025-03-15T22:46:00Z",
        "language": "EN",
        "format": "2D",
        "rating": "PG-13",
        "last_updated": "2025-03-10T12:00:00Z",
    }
    row.update(overrides)
    return row


def make_record(**overrides: str) -> ShowtimeRecord:
    """The canonical record matching make_raw_row() defaults."""
    fields = {
        "theater_name": "Downtown Cinema 7",
        "movie_title": "Dune: Part Two",
        "auditorium": "Auditorium 1",
        "start_time": "2025-03-15T20:00:00Z",
        "end_time": "2025-03-15T22:46:00Z",
        "language": "EN",
        "format": "2D",
        "rating": "PG-13",
        "last_updated": "2025-03-10T12:00:00Z",
    }
    fields.update(overrides)
    return ShowtimeRecord(**fields)


@pytest.fixture
def dune_record() -> ShowtimeRecord:
    return make_record()


@pytest.fixture
def existing_dune(dune_record: ShowtimeRecord) -> ExistingShowtime:
    return ExistingShowtime(id=1, record=dune_record)


@pytest.fixture
def db_conn(tmp_path):
    db_path = tmp_path / "test.db"
    conn = create_schema(db_path)
    yield conn
    conn.close()


@pytest.fixture
def repo(db_conn) -> ShowtimeRepository:
    return ShowtimeRepository(db_conn)
