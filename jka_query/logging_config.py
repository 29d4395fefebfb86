"""Central logging configuration utilities for jka_query.

Library modules only create loggers; the CLI (or an embedding application)
calls `configure_logging` once.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

TRANSPORT_LOGGER = "jka_query.transport"


def configure_logging(
    level: str | int | None = None, *, force: bool = False, trace_packets: bool = False
) -> None:
    """Configure root logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `JKA_LOG_LEVEL`
    3. Fallback to `INFO`

    With `trace_packets` the transport logger alone is lowered to DEBUG, so
    per-datagram send and receive lines show up without the rest of the
    debug output.
    """
    if level is None:
        level = os.environ.get("JKA_LOG_LEVEL", "INFO")

    if isinstance(level, str):
        level = _LEVEL_MAP.get(level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )

    if trace_packets:
        logging.getLogger(TRANSPORT_LOGGER).setLevel(logging.DEBUG)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger."""
    return logging.getLogger(name or "jka_query")


__all__ = ["configure_logging", "get_logger"]
