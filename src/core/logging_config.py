"""Console logging setup.

Log records go to stderr through rich so they never mix with the results
table printed on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_VERBOSITY_LEVELS = (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)


def verbosity_to_level(verbosity: int) -> int:
    """Map a `-v` count to a logging level (0 -> ERROR ... 4+ -> TRACE)."""

    if verbosity < 0:
        return logging.ERROR
    if verbosity >= len(_VERBOSITY_LEVELS):
        return TRACE
    return _VERBOSITY_LEVELS[verbosity]


def setup_logging(verbosity: int = 0) -> None:
    level = verbosity_to_level(verbosity)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbosity >= 3,
        rich_tracebacks=True,
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    logging.getLogger("httpcore").setLevel(max(level, logging.WARNING))
