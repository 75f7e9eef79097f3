"""ShowSync: reconcile partner showtime uploads against the active schedule."""

__version__ = "0.1.0"
