"""Data access layer for ShowSync."""

import json
import logging
import sqlite3
from collections.abc import Iterable

from showsync.db.sample_data import SAMPLE_SCHEDULE
from showsync.engines.differ import canonical_value, comparable_value
from showsync.engines.keys import record_key
from showsync.exceptions import StaleApplyError
from showsync.models.audit import AuditEntry
from showsync.models.enums import ShowtimeField, ShowtimeStatus, SortOrder
from showsync.models.preview import ArchiveAction, ReconciliationPreview, UpdateAction
from showsync.models.showtime import DIFF_FIELDS, ExistingShowtime, ShowtimeRecord
from showsync.normalization.timestamps import canonical_instant, canonical_or_empty

logger = logging.getLogger(__name__)

_RECORD_COLUMNS = (
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


def _sort_column(field: ShowtimeField) -> str:
    match field:
        case ShowtimeField.THEATER_NAME:
            return "theater_name"
        case ShowtimeField.MOVIE_TITLE:
            return "movie_title"
        case ShowtimeField.AUDITORIUM:
            return "auditorium"
        case ShowtimeField.START_TIME:
            return "start_time"
        case ShowtimeField.END_TIME:
            return "end_time"
        case ShowtimeField.LANGUAGE:
            return "language"
        case ShowtimeField.FORMAT:
            return "format"
        case ShowtimeField.RATING:
            return "rating"
        case ShowtimeField.LAST_UPDATED:
            return "last_updated"
    raise ValueError(f"Unknown sort field: {field}")


def _storage_values(record: ShowtimeRecord) -> tuple[str, ...]:
    """Column values for a record, with timestamps stored as canonical instants."""
    return (
        record.theater_name,
        record.movie_title,
        record.auditorium,
        canonical_instant(record.start_time, "startTime"),
        canonical_or_empty(record.end_time, "endTime"),
        record.language,
        record.format,
        record.rating,
        canonical_or_empty(record.last_updated, "lastUpdated"),
    )


def _expected_for_update(update: UpdateAction) -> dict[ShowtimeField, str]:
    """Field values the target held when the preview was built.

    Diffed fields held ``old_value``; every other field matched the incoming data.
    """
    expected = {field: comparable_value(update.data, field) for field in DIFF_FIELDS}
    for diff in update.diffs:
        expected[diff.field] = canonical_value(diff.field, diff.old_value)
    return expected


def _expected_for_archive(archive: ArchiveAction) -> dict[ShowtimeField, str]:
    return {field: comparable_value(archive.data, field) for field in DIFF_FIELDS}


def _row_to_showtime(row: dict) -> ExistingShowtime:
    return ExistingShowtime(
        id=row["id"],
        record=ShowtimeRecord(**{column: row[column] for column in _RECORD_COLUMNS}),
        status=ShowtimeStatus(row["status"]),
    )


class ShowtimeRepository:
    """CRUD operations for showtimes, plus the transactional apply step."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def _query(self, sql: str, params: Iterable = ()) -> list[dict]:
        cursor = self.conn.execute(sql, tuple(params))
        columns = [desc[0] for desc in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    # --- Reads ---

    def get_active_showtimes(self) -> list[ExistingShowtime]:
        """All showtimes on the active schedule, in id order."""
        rows = self._query(
            "SELECT * FROM showtimes WHERE status = ? ORDER BY id",
            (ShowtimeStatus.ACTIVE.value,),
        )
        return [_row_to_showtime(row) for row in rows]

    def get_showtime(self, showtime_id: int) -> ExistingShowtime | None:
        rows = self._query("SELECT * FROM showtimes WHERE id = ?", (showtime_id,))
        return _row_to_showtime(rows[0]) if rows else None

    def list_showtimes(
        self,
        sort: ShowtimeField = ShowtimeField.START_TIME,
        order: SortOrder = SortOrder.ASC,
        title_filter: str = "",
    ) -> list[ExistingShowtime]:
        """Active showtimes sorted by one field, optionally filtered by title substring."""
        direction = "DESC" if order == SortOrder.DESC else "ASC"
        query = "SELECT * FROM showtimes WHERE status = ?"
        params: list[str] = [ShowtimeStatus.ACTIVE.value]
        if title_filter:
            query += " AND instr(lower(movie_title), lower(?)) > 0"
            params.append(title_filter)
        query += f" ORDER BY {_sort_column(sort)} {direction}, id"
        return [_row_to_showtime(row) for row in self._query(query, params)]

    # --- Writes ---

    def insert_showtime(
        self, record: ShowtimeRecord, status: ShowtimeStatus = ShowtimeStatus.ACTIVE
    ) -> int:
        """Insert a showtime. Returns the new row id."""
        showtime_id = self._insert(record, status)
        self.conn.commit()
        return showtime_id

    def _insert(self, record: ShowtimeRecord, status: ShowtimeStatus) -> int:
        cursor = self.conn.execute(
            """INSERT INTO showtimes
               (theater_name, movie_title, auditorium, start_time, end_time,
                language, format, rating, last_updated, status)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (*_storage_values(record), status.value),
        )
        return cursor.lastrowid

    def seed(self, records: Iterable[ShowtimeRecord] = SAMPLE_SCHEDULE) -> int:
        """Replace every showtime with ``records``. Returns the count inserted."""
        with self.conn:
            self.conn.execute("DELETE FROM showtimes")
            count = 0
            for record in records:
                self._insert(record, ShowtimeStatus.ACTIVE)
                count += 1
        logger.info("Seeded %d showtimes", count)
        return count

    def clear(self) -> int:
        """Hard-delete all showtimes, active and archived. Returns count deleted."""
        cursor = self.conn.execute("DELETE FROM showtimes")
        self.conn.commit()
        return cursor.rowcount

    # --- Apply ---

    def apply_preview(self, preview: ReconciliationPreview) -> None:
        """Apply a preview in a single transaction.

        Update and archive targets must still be active, still carry the
        match key the preview was built against, and still hold the field
        values the preview saw. If any target is stale the whole transaction
        is rolled back and StaleApplyError is raised.
        """
        missing: list[int] = []
        changed: list[int] = []

        with self.conn:
            for add in preview.adds:
                self._insert(add.data, ShowtimeStatus.ACTIVE)

            for update in preview.updates:
                expected = _expected_for_update(update)
                if not self._check_target(update.existing_id, update.data, expected, missing, changed):
                    continue
                self.conn.execute(
                    """UPDATE showtimes SET
                       theater_name = ?, movie_title = ?, auditorium = ?,
                       start_time = ?, end_time = ?, language = ?, format = ?,
                       rating = ?, last_updated = ?, updated_at = datetime('now')
                       WHERE id = ?""",
                    (*_storage_values(update.data), update.existing_id),
                )

            for archive in preview.archives:
                expected = _expected_for_archive(archive)
                if not self._check_target(archive.existing_id, archive.data, expected, missing, changed):
                    continue
                self.conn.execute(
                    "UPDATE showtimes SET status = ?, updated_at = datetime('now') WHERE id = ?",
                    (ShowtimeStatus.ARCHIVED.value, archive.existing_id),
                )

            if missing or changed:
                raise StaleApplyError(missing, changed)

        logger.info(
            "Applied preview: %d created, %d updated, %d archived",
            len(preview.adds), len(preview.updates), len(preview.archives),
        )

    def _check_target(
        self,
        showtime_id: int,
        expected_record: ShowtimeRecord,
        expected_values: dict[ShowtimeField, str],
        missing: list[int],
        changed: list[int],
    ) -> bool:
        current = self.get_showtime(showtime_id)
        if current is None or current.status != ShowtimeStatus.ACTIVE:
            missing.append(showtime_id)
            return False
        if record_key(current.record) != record_key(expected_record) or any(
            comparable_value(current.record, field) != value
            for field, value in expected_values.items()
        ):
            changed.append(showtime_id)
            return False
        return True

    # --- Audit log ---

    def save_audit_entry(self, entry: AuditEntry) -> None:
        """Insert an audit log entry."""
        self.conn.execute(
            """INSERT INTO audit_log (timestamp, engine, operation, inputs, output, notes)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                entry.timestamp.isoformat(),
                entry.engine,
                entry.operation,
                json.dumps(entry.inputs, default=str),
                json.dumps(entry.output, default=str),
                entry.notes,
            ),
        )
        self.conn.commit()

    def get_audit_entries(self, operation: str | None = None) -> list[dict]:
        """Retrieve audit log rows, optionally filtered by operation."""
        if operation:
            rows = self._query("SELECT * FROM audit_log WHERE operation = ? ORDER BY id", (operation,))
        else:
            rows = self._query("SELECT * FROM audit_log ORDER BY id")
        for row in rows:
            row["inputs"] = json.loads(row["inputs"])
            row["output"] = json.loads(row["output"])
        return rows
