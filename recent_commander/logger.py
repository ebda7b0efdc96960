"""
Process-wide logging for recent-commander.

Usage:
    from recent_commander.logger import configure_logging
    configure_logging(quiet=args.quiet)

Modules log through ``logging.getLogger(__name__)``; records end up on stderr
as ``recent-commander: <message>``. Quiet mode silences everything, errors
included, so scripts can rely on the exit status alone.
"""

import logging
import sys
from typing import Optional, TextIO

from .config import APP_NAME

LOGGER_NAME = "recent_commander"
QUIET_LEVEL = logging.CRITICAL + 1

_handler: Optional[logging.Handler] = None


def configure_logging(quiet: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach the stderr handler (once) and set its level."""
    global _handler
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(logging.DEBUG)  # filter on the handler
    log.propagate = False

    if _handler is not None:
        log.removeHandler(_handler)
    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(f"{APP_NAME}: %(message)s"))
    log.addHandler(_handler)

    if quiet:
        _handler.setLevel(QUIET_LEVEL)
    else:
        _handler.setLevel(logging.INFO)
    return log
