"""Tests for raw row cleaning and the required-field filter."""

from conftest import make_raw_row
from showsync.engines.cleaner import clean_row, has_required_fields


class TestCleanRow:
    def test_maps_and_trims(self):
        record = clean_row(make_raw_row(movie_title="  Dune: Part Two ", auditorium=" Auditorium 1\t"))
        assert record.movie_title == "Dune: Part Two"
        assert record.auditorium == "Auditorium 1"
        assert record.theater_name == "Downtown Cinema 7"
        assert record.start_time == "2025-03-15T20:00:00Z"
        assert record.last_updated == "2025-03-10T12:00:00Z"

    def test_missing_columns_default_empty(self):
        record = clean_row({"movie_title": "Wonka", "start_time": "2025-03-15T16:00:00Z"})
        assert record.theater_name == ""
        assert record.end_time == ""
        assert record.rating == ""
        assert record.last_updated == ""

    def test_none_values_default_empty(self):
        record = clean_row(make_raw_row(language=None, format=None))
        assert record.language == ""
        assert record.format == ""

    def test_title_not_normalized(self):
        record = clean_row(make_raw_row(movie_title="DUNE: PART TWO!"))
        assert record.movie_title == "DUNE: PART TWO!"

    def test_unknown_columns_ignored(self):
        record = clean_row(make_raw_row(distributor="Legendary"))
        assert "distributor" not in record.model_dump()


class TestHasRequiredFields:
    def test_complete_row(self):
        assert has_required_fields(make_raw_row()) is True

    def test_whitespace_title(self):
        assert has_required_fields(make_raw_row(movie_title="   ")) is False

    def test_missing_start_time(self):
        row = make_raw_row()
        del row["start_time"]
        assert has_required_fields(row) is False

    def test_none_start_time(self):
        assert has_required_fields(make_raw_row(start_time=None)) is False

    def test_optional_fields_not_required(self):
        assert has_required_fields({"movie_title": "Wonka", "start_time": "2025-03-15T16:00:00Z"}) is True
