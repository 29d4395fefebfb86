"""
Query façade for JKA Query.

One coroutine per query kind: validate the parameters, resolve the server
address, run the UDP exchange and parse the reply.
"""

import asyncio
from typing import List, Optional, Sequence, Union

from .address import resolve
from .constants import BAD_RCON_PASSWORD_REPLY, DEFAULT_REQUEST_TIMEOUT, QUIET_PERIOD
from .errors import JkaQueryError, ParameterError, RconAuthenticationError
from .logging_config import get_logger
from .models import QueryRequest, StatusDocument, StatusVariant
from .parsers import parse_status, strip_print_headers
from .transport import exchange

logger = get_logger(__name__)


async def send_query(server: str, payload: str, timeout: Optional[float] = None, *,
                     quiet_period: float = QUIET_PERIOD) -> str:
    """
    Send an out-of-band command and return the raw reply text.

    Args:
        server: Server address as ``host:port``
        payload: Command to send, e.g. ``getstatus``
        timeout: Overall deadline in seconds (DEFAULT_REQUEST_TIMEOUT if None)
        quiet_period: Seconds to keep collecting after the first datagram

    Raises:
        ParameterError, FormatError, PortRangeError: Before any network I/O
        QueryNetworkError: If the UDP endpoint cannot be opened
        QueryTimeoutError: If the server does not answer in time
    """
    missing = [name for name, value in (('server', server), ('request', payload)) if not value]
    if missing:
        raise ParameterError(f'Parameter "{missing[0]}" is required!')

    target = resolve(server)
    request = QueryRequest(target, payload, DEFAULT_REQUEST_TIMEOUT if timeout is None else timeout)
    return await exchange(request, quiet_period=quiet_period)


async def get_status(server: str, timeout: Optional[float] = None) -> StatusDocument:
    """Query ``getstatus`` and parse cvars and players."""
    try:
        raw = await send_query(server, 'getstatus', timeout)
    except JkaQueryError:
        logger.warning("GetStatus request to %s failed", server)
        raise
    return parse_status(raw, StatusVariant.PLAIN_STATUS)


async def rcon_command(server: str, password: str, command: str,
                       timeout: Optional[float] = None) -> str:
    """
    Run a remote console command and return its printed output.

    Raises:
        ParameterError: If password or command is empty
        RconAuthenticationError: If the server rejects the password
    """
    if not password:
        raise ParameterError('Parameter "password" is required!')
    if not command:
        raise ParameterError('Parameter "command" is required!')

    raw = await send_query(server, f'rcon {password} {command}', timeout)
    output = strip_print_headers(raw)
    if output.strip() == BAD_RCON_PASSWORD_REPLY:
        raise RconAuthenticationError(f"RCON authentication failed for {server}: {BAD_RCON_PASSWORD_REPLY}")
    return output


async def rcon_status(server: str, password: str, timeout: Optional[float] = None) -> StatusDocument:
    """Run ``status`` over rcon and parse map and player table."""
    output = await rcon_command(server, password, 'status', timeout)
    return parse_status(output, StatusVariant.RCON_STATUS)


async def query_many(servers: Sequence[str], timeout: Optional[float] = None
                     ) -> List[Union[StatusDocument, JkaQueryError]]:
    """Query several servers concurrently; errors are returned in place of results."""
    results = await asyncio.gather(
        *(get_status(server, timeout) for server in servers),
        return_exceptions=True,
    )
    for result in results:
        # Only query errors are reported in place; anything else is a bug
        if isinstance(result, BaseException) and not isinstance(result, JkaQueryError):
            raise result
    return list(results)


__all__ = ["send_query", "get_status", "rcon_command", "rcon_status", "query_many"]
