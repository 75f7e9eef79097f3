"""Field-level diff between two showtimes with the same match key."""

from showsync.models.enums import ShowtimeField
from showsync.models.showtime import DIFF_FIELDS, TIMESTAMP_FIELDS, FieldDiff, ShowtimeRecord, field_value
from showsync.normalization.timestamps import canonical_or_empty


def canonical_value(field: ShowtimeField, value: str) -> str:
    """The form a field value is compared in: timestamps as canonical instants."""
    if field in TIMESTAMP_FIELDS:
        return canonical_or_empty(value, field.value)
    return value


def comparable_value(record: ShowtimeRecord, field: ShowtimeField) -> str:
    return canonical_value(field, field_value(record, field))


def diff_records(existing: ShowtimeRecord, incoming: ShowtimeRecord) -> list[FieldDiff]:
    """List the fields that differ, in DIFF_FIELDS order.

    startTime is never compared: it is part of the match key. The movie
    title is compared as raw text, so a casing or punctuation fix shows up
    as a change even though both titles normalize the same.
    """
    diffs: list[FieldDiff] = []
    for field in DIFF_FIELDS:
        old_value = comparable_value(existing, field)
        new_value = comparable_value(incoming, field)
        if old_value != new_value:
            diffs.append(FieldDiff(field=field, old_value=old_value, new_value=new_value))
    return diffs
