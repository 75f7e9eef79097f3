"""Ingestion adapters for partner uploads and saved previews."""

from showsync.ingestion.base import BaseAdapter, ParsedBatch
from showsync.ingestion.csv_schedule import CsvScheduleAdapter
from showsync.ingestion.preview_file import PreviewFileAdapter, validate_payload

__all__ = ["BaseAdapter", "CsvScheduleAdapter", "ParsedBatch", "PreviewFileAdapter", "validate_payload"]
