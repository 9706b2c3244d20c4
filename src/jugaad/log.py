"""Console logging for the jugaad CLI.

Library code only creates module loggers; the CLI calls
:func:`setup_logging` once to route them to stderr as
``timestamp | LEVEL | logger | message`` lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


class _JugaadHandler(logging.StreamHandler):
    """Stream handler installed by :func:`setup_logging`."""


def _installed_handler(root: logging.Logger) -> _JugaadHandler | None:
    for handler in root.handlers:
        if isinstance(handler, _JugaadHandler):
            return handler
    return None


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Send log records at *level* and above to *stream* (default stderr).

    Repeated calls reuse the handler installed by the first one and only
    change its level; handlers added by an embedding application are
    left alone.

    Raises:
        ValueError: If *level* is not a standard level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    handler = _installed_handler(root)
    if handler is None:
        handler = _JugaadHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
    handler.setLevel(numeric_level)
