"""Configuration resolution for the jka-query CLI.

Timing limits live in :mod:`jka_query.constants` and are not configurable;
this module only covers defaults the CLI takes from the environment:

* `JKA_RCON_PASSWORD` - rcon password used when `--password` is omitted
* `JKA_QUERY_TIMEOUT` - default overall timeout in seconds
* `JKA_LOG_LEVEL`     - consumed by :func:`jka_query.logging_config.configure_logging`
"""

import os
from typing import Mapping, Optional

from .constants import DEFAULT_REQUEST_TIMEOUT
from .errors import RconPasswordNotFoundError
from .logging_config import get_logger


class QuerySettings:
    """Resolve environment-backed configuration for jka-query."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._environ.get(key, default)

    def rcon_password(self, explicit: Optional[str] = None) -> str:
        """
        Pick the rcon password from the command line or the environment.

        Raises:
            RconPasswordNotFoundError: If neither source provides one
        """
        password = explicit or self.get("JKA_RCON_PASSWORD")
        if not password:
            raise RconPasswordNotFoundError(
                "Could not find an RCON password in --password or JKA_RCON_PASSWORD"
            )
        return password

    def timeout(self, explicit: Optional[float] = None) -> float:
        if explicit is not None:
            return explicit
        raw = self.get("JKA_QUERY_TIMEOUT")
        if not raw:
            return DEFAULT_REQUEST_TIMEOUT
        try:
            return float(raw)
        except ValueError:
            get_logger(__name__).warning(
                "Invalid JKA_QUERY_TIMEOUT %r; falling back to %ss", raw, DEFAULT_REQUEST_TIMEOUT
            )
            return DEFAULT_REQUEST_TIMEOUT
