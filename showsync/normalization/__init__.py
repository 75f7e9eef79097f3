"""Normalization of titles and timestamps for showtime matching."""

from showsync.normalization.timestamps import canonical_instant, canonical_or_empty, parse_timestamp
from showsync.normalization.titles import normalize_title

__all__ = ["canonical_instant", "canonical_or_empty", "normalize_title", "parse_timestamp"]
