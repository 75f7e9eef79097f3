"""Logging setup for the ShowSync CLI."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(verbose: bool = False, force: bool = False) -> None:
    """Initialise the root logger once.

    WARNING by default so CLI output stays clean; DEBUG with ``verbose``.
    Pass ``force=True`` to reconfigure from tests.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
