"""
Server address parsing for JKA Query.

Splits ``host:port`` strings into a :class:`QueryTarget`. Host names are not
resolved here; the transport leaves that to the event loop.
"""

from .constants import MAX_PORT, MIN_PORT
from .errors import FormatError, ParameterError, PortRangeError
from .models import QueryTarget

INCORRECT_FORMAT_MESSAGE = (
    'Parameter "server" has incorrect format!\n'
    'Required format: "server_ipv4_or_domainname:port"\n'
    'e.g. 242.9.9.9:29071 or server.com:30001'
)


def resolve(server: str) -> QueryTarget:
    """
    Validate a ``host:port`` string and split it.

    Args:
        server: Address in ``host:port`` form

    Returns:
        The parsed query target

    Raises:
        ParameterError: If server is missing
        FormatError: If the string does not hold exactly one colon or the
            port is not numeric
        PortRangeError: If the port is outside [1, 65534]
    """
    if not server or not isinstance(server, str):
        raise ParameterError('Parameter "server" is required!')

    parts = server.split(':')
    if len(parts) != 2:
        raise FormatError(INCORRECT_FORMAT_MESSAGE)

    host, port_text = parts
    # ASCII digits with an optional minus sign; negative ports fail the range check below
    digits = port_text[1:] if port_text.startswith('-') else port_text
    if not (digits.isascii() and digits.isdigit()):
        raise FormatError(INCORRECT_FORMAT_MESSAGE)
    port = int(port_text)

    if not (MIN_PORT <= port <= MAX_PORT):
        raise PortRangeError(f'Port must be a number in range [{MIN_PORT}-{MAX_PORT}]!')

    return QueryTarget(host, port)
