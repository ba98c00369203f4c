"""Logging setup for command line entry points."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for CLI runs.

    Creation phases log at DEBUG, so ``--verbose`` maps to ``logging.DEBUG``.
    ``force=True`` replaces handlers installed by an earlier call.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
