"""
Out-of-band UDP exchange for JKA Query.

A query is a single datagram prefixed with four 0xFF bytes. Servers answer
with one or more datagrams and no completion marker, so the exchange waits
for the first datagram (bounded by the overall deadline) and then keeps
collecting for a fixed quiet period measured from that first arrival.
"""

import asyncio
import numbers
from typing import List, Optional

from .constants import MIN_REQUEST_TIMEOUT, OOB_PREFIX, QUIET_PERIOD
from .errors import ParameterError, QueryNetworkError, QueryTimeoutError
from .logging_config import get_logger
from .models import QueryRequest, QueryTarget

NO_RESPONSE_MESSAGE = 'No response!'

logger = get_logger(__name__)


class OobReplyProtocol(asyncio.DatagramProtocol):
    """Datagram protocol collecting the replies to one request."""

    def __init__(self, packet: bytes, loop: asyncio.AbstractEventLoop):
        self.packet = packet
        self.loop = loop
        # Resolves with the loop time of the first datagram
        self.first_datagram = loop.create_future()
        self.chunks: List[bytes] = []
        self.transport = None
        self.listening = True

    def connection_made(self, transport):
        self.transport = transport
        transport.sendto(self.packet)
        logger.debug("Sent %d byte query packet", len(self.packet))

    def datagram_received(self, data, addr):
        if not self.listening:
            logger.debug("Dropping late datagram from %s", addr)
            return
        self.chunks.append(data)
        logger.debug("Received %d byte datagram from %s", len(data), addr)
        if not self.first_datagram.done():
            self.first_datagram.set_result(self.loop.time())

    def error_received(self, exc):
        # ICMP errors (e.g. port unreachable) do not settle the call.
        logger.debug("UDP endpoint reported error: %s", exc)

    def stop_listening(self) -> None:
        """Unregister interest in further datagrams."""
        self.listening = False

    def reply_text(self) -> str:
        """Concatenate received datagrams in arrival order."""
        return b''.join(self.chunks).decode('latin-1')


def validate_request(request: QueryRequest) -> None:
    """
    Validate a query request before any network I/O.

    Raises:
        ParameterError: If the payload is empty or the timeout is not a
            number of at least MIN_REQUEST_TIMEOUT seconds
    """
    if not request.payload or not isinstance(request.payload, str):
        raise ParameterError('Parameter "request" is required!')

    timeout = request.timeout
    if isinstance(timeout, bool) or not isinstance(timeout, numbers.Real):
        raise ParameterError('Parameter "timeout" must be a number!')
    # Negated comparison also rejects NaN
    if not timeout >= MIN_REQUEST_TIMEOUT:
        raise ParameterError(f'Parameter "timeout" must be at least {MIN_REQUEST_TIMEOUT} seconds!')


def build_packet(payload: str) -> bytes:
    """Prefix a command with the out-of-band header, one byte per character."""
    try:
        return OOB_PREFIX + payload.encode('latin-1')
    except UnicodeEncodeError as exc:
        raise ParameterError(f'Parameter "request" contains characters outside Latin-1: {exc}') from exc


async def _open_channel(loop: asyncio.AbstractEventLoop, packet: bytes, target: QueryTarget):
    try:
        return await loop.create_datagram_endpoint(
            lambda: OobReplyProtocol(packet, loop),
            remote_addr=target.as_address(),
        )
    except OSError as exc:
        raise QueryNetworkError(f"Could not open UDP channel to {target}: {exc}") from exc


async def exchange(request: QueryRequest, *, quiet_period: float = QUIET_PERIOD) -> str:
    """
    Send one query datagram and collect the reply.

    Args:
        request: Target, command payload and overall timeout
        quiet_period: Seconds to keep collecting after the first datagram

    Returns:
        All received datagrams concatenated in arrival order

    Raises:
        ParameterError: If the request is invalid (no packet is sent)
        QueryNetworkError: If the UDP endpoint cannot be opened
        QueryTimeoutError: If no datagram arrives before the deadline
    """
    validate_request(request)
    packet = build_packet(request.payload)

    loop = asyncio.get_running_loop()
    deadline = loop.time() + request.timeout

    try:
        transport, protocol = await asyncio.wait_for(
            _open_channel(loop, packet, request.target), request.timeout
        )
    except asyncio.TimeoutError:
        logger.debug("Opening channel to %s exceeded %ss", request.target, request.timeout)
        raise QueryTimeoutError(NO_RESPONSE_MESSAGE) from None

    try:
        arrival: Optional[float]
        try:
            arrival = await asyncio.wait_for(protocol.first_datagram, max(0.0, deadline - loop.time()))
        except asyncio.TimeoutError:
            arrival = None

        # A first datagram landing exactly on the deadline counts as a timeout
        if arrival is None or arrival >= deadline:
            protocol.stop_listening()
            logger.debug("No response from %s within %ss", request.target, request.timeout)
            raise QueryTimeoutError(NO_RESPONSE_MESSAGE)

        await asyncio.sleep(max(0.0, arrival + quiet_period - loop.time()))
        protocol.stop_listening()
        reply = protocol.reply_text()
        logger.debug("Collected %d datagram(s), %d chars from %s",
                     len(protocol.chunks), len(reply), request.target)
        return reply
    finally:
        transport.close()


__all__ = ["OobReplyProtocol", "build_packet", "exchange", "validate_request", "NO_RESPONSE_MESSAGE"]
