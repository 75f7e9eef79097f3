"""Data models for ShowSync."""

from showsync.models.audit import AuditEntry
from showsync.models.enums import (
    ApplyFailureReason,
    ShowtimeField,
    ShowtimeStatus,
    SortOrder,
    TimestampPolicy,
)
from showsync.models.preview import (
    AddAction,
    ApplyResult,
    ArchiveAction,
    ReconciliationPreview,
    UpdateAction,
)
from showsync.models.showtime import (
    CSV_COLUMNS,
    DIFF_FIELDS,
    REQUIRED_COLUMNS,
    TIMESTAMP_FIELDS,
    ExistingShowtime,
    FieldDiff,
    ShowtimeRecord,
    field_value,
)

__all__ = [
    "AddAction",
    "ApplyFailureReason",
    "ApplyResult",
    "ArchiveAction",
    "AuditEntry",
    "CSV_COLUMNS",
    "DIFF_FIELDS",
    "ExistingShowtime",
    "FieldDiff",
    "REQUIRED_COLUMNS",
    "ReconciliationPreview",
    "ShowtimeField",
    "ShowtimeRecord",
    "ShowtimeStatus",
    "SortOrder",
    "TIMESTAMP_FIELDS",
    "TimestampPolicy",
    "UpdateAction",
    "field_value",
]
