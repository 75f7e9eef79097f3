"""Database layer for ShowSync."""

from showsync.db.repository import ShowtimeRepository
from showsync.db.schema import create_schema

__all__ = ["ShowtimeRepository", "create_schema"]
