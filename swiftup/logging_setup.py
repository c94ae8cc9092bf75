"""Logging configuration for the command line."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = "SWIFTUP_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else DEFAULT_LEVEL


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich.

    ``verbose`` forces DEBUG, otherwise $SWIFTUP_LOG_LEVEL decides.
    """
    level = logging.DEBUG if verbose else _level_from_env()
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        rich_tracebacks=verbose,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
