"""Partner schedule CSV adapter."""

import csv
import io
import logging
from pathlib import Path

from showsync.exceptions import ScheduleImportError
from showsync.ingestion.base import BaseAdapter, ParsedBatch
from showsync.models.showtime import CSV_COLUMNS

logger = logging.getLogger(__name__)


def _is_blank(row: list[str]) -> bool:
    return all(not cell.strip() for cell in row)


class CsvScheduleAdapter(BaseAdapter):
    """Reads a partner showtime CSV with a header row of snake_case columns."""

    def parse(self, file_path: Path) -> ParsedBatch:
        """Read the CSV into header-keyed rows.

        Headers are trimmed and blank lines skipped. Rows whose field count
        differs from the header are kept out of ``rows`` and reported as
        structural errors.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if file_path.suffix.lower() != ".csv":
            raise ScheduleImportError(
                file_path.name,
                f'Expected a .csv file but received "{file_path.name}". Please upload a CSV file.',
            )

        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ScheduleImportError(
                file_path.name, "File is not valid UTF-8 text. Please save the CSV as UTF-8."
            ) from exc
        if not text.strip():
            raise ScheduleImportError(file_path.name, "The uploaded CSV file is empty.")

        try:
            records = [row for row in csv.reader(io.StringIO(text)) if not _is_blank(row)]
        except csv.Error as exc:
            raise ScheduleImportError(file_path.name, f"Could not parse CSV: {exc}") from exc

        batch = ParsedBatch(source=file_path.name)
        if not records:
            return batch

        batch.headers = [header.strip() for header in records[0]]
        for number, row in enumerate(records[1:], start=1):
            if len(row) != len(batch.headers):
                batch.structural_errors.append(
                    f"Row {number}: expected {len(batch.headers)} fields, found {len(row)}"
                )
                continue
            batch.rows.append(dict(zip(batch.headers, row)))

        logger.debug("Parsed %d row(s) from %s", len(batch.rows), file_path.name)
        return batch

    def validate(self, data: ParsedBatch) -> list[str]:
        """Validate that the batch is eligible for reconciliation."""
        errors: list[str] = []

        if data.structural_errors:
            errors.append(f"CSV has structural errors: {'; '.join(data.structural_errors)}")

        if data.missing_required:
            errors.append(
                f"CSV is missing required column(s): {', '.join(data.missing_required)}. "
                f"Expected columns: {', '.join(CSV_COLUMNS)}"
            )

        if not data.rows and not data.structural_errors:
            errors.append("The CSV file contains headers but no data rows.")

        return errors
