"""Runtime settings for the ShowSync CLI."""

from pathlib import Path

DB_ENV_VAR = "SHOWSYNC_DB"
DEFAULT_DB_PATH = Path.home() / ".showsync" / "showsync.db"
