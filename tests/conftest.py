"""Test configuration: a fake UDP game server on the loopback interface."""

from __future__ import annotations

import asyncio
import contextlib
import os
import sys
from typing import List, Sequence

import pytest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from jka_query import queries  # noqa: E402


class FakeGameServer(asyncio.DatagramProtocol):
    """Answers every query datagram with canned reply datagrams."""

    def __init__(self, replies: Sequence[bytes], gap: float = 0.0, delay: float = 0.0) -> None:
        self.replies = list(replies)
        self.gap = gap
        self.delay = delay
        self.received: List[bytes] = []
        self.transport = None

    def connection_made(self, transport) -> None:
        self.transport = transport

    def datagram_received(self, data, addr) -> None:
        self.received.append(data)
        if self.replies:
            asyncio.ensure_future(self._answer(addr))

    async def _answer(self, addr) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        for index, reply in enumerate(self.replies):
            if index and self.gap:
                await asyncio.sleep(self.gap)
            self.transport.sendto(reply, addr)


@contextlib.asynccontextmanager
async def _fake_server(replies: Sequence[bytes] = (), gap: float = 0.0, delay: float = 0.0):
    loop = asyncio.get_running_loop()
    transport, protocol = await loop.create_datagram_endpoint(
        lambda: FakeGameServer(replies, gap, delay),
        local_addr=("127.0.0.1", 0),
    )
    try:
        host, port = transport.get_extra_info("sockname")[:2]
        yield f"{host}:{port}", protocol
    finally:
        transport.close()


@pytest.fixture
def fake_server():
    """Factory: ``async with fake_server(replies, gap, delay) as (address, server)``."""
    return _fake_server


@pytest.fixture
def short_quiet_period(monkeypatch):
    """Shrink the façade's quiet period so tests do not wait two seconds."""
    original = queries.exchange

    async def fast_exchange(request, *, quiet_period=None):
        return await original(request, quiet_period=0.1)

    monkeypatch.setattr(queries, "exchange", fast_exchange)
