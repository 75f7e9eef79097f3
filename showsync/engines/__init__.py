"""Reconciliation engines."""

from showsync.engines.apply import ApplyExecutor
from showsync.engines.cleaner import clean_row, has_required_fields
from showsync.engines.dedup import dedupe
from showsync.engines.differ import diff_records
from showsync.engines.keys import make_key, record_key
from showsync.engines.reconciliation import ScheduleReconciler, reconcile

__all__ = [
    "ApplyExecutor",
    "ScheduleReconciler",
    "clean_row",
    "dedupe",
    "diff_records",
    "has_required_fields",
    "make_key",
    "reconcile",
    "record_key",
]
