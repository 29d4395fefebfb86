"""JKA Query - out-of-band UDP queries for Jedi Academy / Quake3 family servers.

Python implementation providing:
* `getstatus` and rcon queries over the connectionless UDP protocol
* Tolerant parsers turning status replies into typed records
* Cron-scheduled status polling
* Thin CLI wrapper (`jka-query`)

The coroutines exported here are the programmatic API; the CLI is a thin
layer on top of them.
"""

from .address import resolve  # noqa: F401
from .constants import GameType, CvarType  # noqa: F401
from .errors import (  # noqa: F401
    ErrorKind,
    JkaQueryError,
    ParameterError,
    FormatError,
    PortRangeError,
    QueryTimeoutError,
    StructureError,
    QueryNetworkError,
    RconAuthenticationError,
)
from .logging_config import configure_logging  # noqa: F401
from .models import PlayerRecord, QueryRequest, QueryTarget, StatusDocument, StatusVariant  # noqa: F401
from .parsers import parse_cvar_value, parse_status  # noqa: F401
from .queries import get_status, query_many, rcon_command, rcon_status, send_query  # noqa: F401
from .transport import exchange  # noqa: F401

__version__ = "1.0.0"

__all__ = [
	"__version__",
	"configure_logging",
	"resolve",
	"exchange",
	"parse_status",
	"parse_cvar_value",
	"send_query",
	"get_status",
	"rcon_command",
	"rcon_status",
	"query_many",
	"GameType",
	"CvarType",
	"ErrorKind",
	"JkaQueryError",
	"ParameterError",
	"FormatError",
	"PortRangeError",
	"QueryTimeoutError",
	"StructureError",
	"QueryNetworkError",
	"RconAuthenticationError",
	"PlayerRecord",
	"QueryRequest",
	"QueryTarget",
	"StatusDocument",
	"StatusVariant",
]
