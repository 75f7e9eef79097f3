"""Collapse incoming showtimes that share a match key."""

import logging
from collections.abc import Iterable

from showsync.engines.keys import record_key
from showsync.models.showtime import ShowtimeRecord

logger = logging.getLogger(__name__)


def dedupe(records: Iterable[ShowtimeRecord]) -> dict[str, ShowtimeRecord]:
    """Key records by match key. The first record seen for a key wins.

    Order-dependent: reordering the input can change which duplicate survives.
    """
    by_key: dict[str, ShowtimeRecord] = {}
    for record in records:
        key = record_key(record)
        if key in by_key:
            logger.debug("Dropping duplicate showtime %s", key)
            continue
        by_key[key] = record
    return by_key
