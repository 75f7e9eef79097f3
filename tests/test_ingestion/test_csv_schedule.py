"""Tests for the partner schedule CSV adapter."""

import pytest

from showsync.exceptions import ScheduleImportError
from showsync.ingestion.csv_schedule import CsvScheduleAdapter

HEADER = "theater_name,movie_title,auditorium,start_time,end_time,language,format,rating,last_updated"
DUNE_ROW = (
    "Downtown Cinema 7,Dune: Part Two,Auditorium 1,2025-03-15T20:00:00Z,"
    "2025-03-15T22:46:00Z,EN,2D,PG-13,2025-03-10T12:00:00Z"
)


@pytest.fixture
def adapter():
    return CsvScheduleAdapter()


def _write(tmp_path, text, name="schedule.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestParse:
    def test_valid_file(self, adapter, tmp_path):
        batch = adapter.parse(_write(tmp_path, f"{HEADER}\n{DUNE_ROW}\n"))
        assert batch.source == "schedule.csv"
        assert len(batch.rows) == 1
        assert batch.rows[0]["movie_title"] == "Dune: Part Two"
        assert batch.rows[0]["rating"] == "PG-13"
        assert adapter.validate(batch) == []
        assert batch.warnings() == []

    def test_quoted_comma(self, adapter, tmp_path):
        row = DUNE_ROW.replace("Downtown Cinema 7", '"Cinema 7, Downtown"')
        batch = adapter.parse(_write(tmp_path, f"{HEADER}\n{row}\n"))
        assert batch.rows[0]["theater_name"] == "Cinema 7, Downtown"

    def test_bom_and_padded_headers(self, adapter, tmp_path):
        header = HEADER.replace("movie_title", " movie_title ")
        batch = adapter.parse(_write(tmp_path, f"\ufeff{header}\n{DUNE_ROW}\n"))
        assert batch.headers[0] == "theater_name"
        assert "movie_title" in batch.headers
        assert batch.rows[0]["movie_title"] == "Dune: Part Two"

    def test_blank_lines_skipped(self, adapter, tmp_path):
        batch = adapter.parse(_write(tmp_path, f"{HEADER}\n\n{DUNE_ROW}\n\n"))
        assert len(batch.rows) == 1
        assert batch.structural_errors == []

    def test_field_count_mismatch(self, adapter, tmp_path):
        batch = adapter.parse(_write(tmp_path, f"{HEADER}\n{DUNE_ROW}\nWonka,2025-03-15T16:00:00Z\n"))
        assert len(batch.rows) == 1
        assert batch.structural_errors == ["Row 2: expected 9 fields, found 2"]
        errors = adapter.validate(batch)
        assert len(errors) == 1
        assert errors[0].startswith("CSV has structural errors")

    def test_missing_file(self, adapter, tmp_path):
        with pytest.raises(FileNotFoundError):
            adapter.parse(tmp_path / "nope.csv")

    def test_wrong_extension(self, adapter, tmp_path):
        with pytest.raises(ScheduleImportError, match="Expected a .csv file"):
            adapter.parse(_write(tmp_path, HEADER, name="schedule.xlsx"))

    def test_non_utf8_file(self, adapter, tmp_path):
        path = tmp_path / "schedule.csv"
        path.write_bytes(b"movie_title,start_time\nAm\xe9lie,2025-03-15T16:00:00Z\n")
        with pytest.raises(ScheduleImportError, match="not valid UTF-8"):
            adapter.parse(path)

    def test_empty_file(self, adapter, tmp_path):
        with pytest.raises(ScheduleImportError, match="empty"):
            adapter.parse(_write(tmp_path, "  \n"))


class TestValidate:
    def test_missing_required_column(self, adapter, tmp_path):
        header = HEADER.replace("start_time,", "")
        row = DUNE_ROW.replace("2025-03-15T20:00:00Z,", "")
        errors = adapter.validate(adapter.parse(_write(tmp_path, f"{header}\n{row}\n")))
        assert len(errors) == 1
        assert "missing required column(s): start_time" in errors[0]

    def test_header_only(self, adapter, tmp_path):
        errors = adapter.validate(adapter.parse(_write(tmp_path, f"{HEADER}\n")))
        assert errors == ["The CSV file contains headers but no data rows."]

    def test_missing_optional_columns_warn(self, adapter, tmp_path):
        batch = adapter.parse(_write(tmp_path, "movie_title,start_time\nWonka,2025-03-15T16:00:00Z\n"))
        assert adapter.validate(batch) == []
        warnings = batch.warnings()
        assert len(warnings) == 1
        assert "theater_name" in warnings[0]
        assert "last_updated" in warnings[0]
        assert "movie_title" not in warnings[0]
