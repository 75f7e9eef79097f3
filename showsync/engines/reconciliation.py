"""Reconciliation engine: the core of ShowSync.

Compares an uploaded partner batch against the active schedule and sorts
every showtime into one of three buckets:

  - ADD:     in the upload, not on the schedule
  - UPDATE:  in both, with field-level differences
  - ARCHIVE: on the schedule, missing from the upload (soft delete)

Matched showtimes without differences produce nothing. The result is a
preview only; the store is never touched here.
"""

import logging
from collections.abc import Iterable, Sequence

from showsync.engines.cleaner import RawRow, clean_row, has_required_fields
from showsync.engines.dedup import dedupe
from showsync.engines.differ import diff_records
from showsync.engines.keys import record_key
from showsync.exceptions import MalformedTimestampError
from showsync.models.enums import ShowtimeField, TimestampPolicy
from showsync.models.preview import AddAction, ArchiveAction, ReconciliationPreview, UpdateAction
from showsync.models.showtime import ExistingShowtime, ShowtimeRecord
from showsync.normalization.timestamps import canonical_or_empty, parse_timestamp

logger = logging.getLogger(__name__)


class ScheduleReconciler:
    """Builds a reconciliation preview from raw rows and existing showtimes."""

    def __init__(self, policy: TimestampPolicy = TimestampPolicy.SKIP):
        self.policy = policy

    def reconcile(
        self,
        incoming_rows: Iterable[RawRow],
        existing: Sequence[ExistingShowtime],
    ) -> ReconciliationPreview:
        """Classify every showtime into add / update / archive.

        Steps:
        1. Drop rows missing a movie title or start time; clean the rest
        2. Check timestamps per the timestamp policy
        3. Deduplicate the upload by match key (first occurrence wins)
        4. Key the existing showtimes (last write wins on collision)
        5. Matched keys with diffs become updates, unmatched uploads adds
        6. Existing keys never matched become archives

        Raises:
            MalformedTimestampError: under TimestampPolicy.ABORT, for the
                first upload row with an unparseable timestamp.
        """
        warnings: list[str] = []

        records = self._clean_rows(incoming_rows, warnings)
        incoming_by_key = dedupe(records)
        existing_by_key = self._key_existing(existing, warnings)

        adds: list[AddAction] = []
        updates: list[UpdateAction] = []
        matched: set[str] = set()

        for key, incoming in incoming_by_key.items():
            current = existing_by_key.get(key)
            if current is None:
                adds.append(AddAction(data=incoming))
                continue
            matched.add(key)
            diffs = diff_records(current.record, incoming)
            if diffs:
                updates.append(UpdateAction(existing_id=current.id, data=incoming, diffs=diffs))

        archives = [
            ArchiveAction(existing_id=current.id, data=current.record)
            for key, current in existing_by_key.items()
            if key not in matched
        ]

        logger.info(
            "Reconciled %d incoming against %d existing: %d add, %d update, %d archive",
            len(incoming_by_key), len(existing_by_key), len(adds), len(updates), len(archives),
        )
        return ReconciliationPreview(
            adds=adds,
            updates=updates,
            archives=archives,
            warnings=warnings,
        )

    def _clean_rows(self, incoming_rows: Iterable[RawRow], warnings: list[str]) -> list[ShowtimeRecord]:
        records: list[ShowtimeRecord] = []
        for index, raw in enumerate(incoming_rows, start=1):
            if not has_required_fields(raw):
                logger.debug("Row %d skipped: missing movie title or start time", index)
                continue
            record = clean_row(raw)
            try:
                self._check_timestamps(record)
            except MalformedTimestampError as exc:
                if self.policy == TimestampPolicy.ABORT:
                    raise
                message = f"Row {index} ({record.movie_title}) skipped: {exc}"
                logger.warning(message)
                warnings.append(message)
                continue
            records.append(record)
        return records

    @staticmethod
    def _check_timestamps(record: ShowtimeRecord) -> None:
        parse_timestamp(record.start_time, ShowtimeField.START_TIME.value)
        canonical_or_empty(record.end_time, ShowtimeField.END_TIME.value)
        canonical_or_empty(record.last_updated, ShowtimeField.LAST_UPDATED.value)

    def _key_existing(
        self, existing: Sequence[ExistingShowtime], warnings: list[str]
    ) -> dict[str, ExistingShowtime]:
        by_key: dict[str, ExistingShowtime] = {}
        for showtime in existing:
            key = record_key(showtime.record)
            shadowed = by_key.get(key)
            if shadowed is not None:
                message = (
                    f"Active showtimes {shadowed.id} and {showtime.id} share match key "
                    f"'{key}'; only {showtime.id} is reconciled"
                )
                logger.warning(message)
                warnings.append(message)
            by_key[key] = showtime
        return by_key


def reconcile(
    incoming_rows: Iterable[RawRow],
    existing: Sequence[ExistingShowtime],
    policy: TimestampPolicy = TimestampPolicy.SKIP,
) -> ReconciliationPreview:
    """Reconcile with a fresh ScheduleReconciler."""
    return ScheduleReconciler(policy).reconcile(incoming_rows, existing)
