"""Value types passed between the resolver, transport and parsers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .constants import DEFAULT_REQUEST_TIMEOUT, STATUS_FIELDS, CvarType, GameType

_COLOR_CODE = re.compile(r'\^\d')


def strip_colors(text: str) -> str:
    """Remove ``^N`` colour codes from a player or server name."""
    return _COLOR_CODE.sub('', text)


def decode_gametype(raw: Optional[str]) -> Optional[GameType]:
    """Decode a raw ``g_gametype`` value; unknown or missing values give None."""
    if raw is None:
        return None
    try:
        return GameType(int(raw.strip()))
    except ValueError:
        return None


def decode_cvar(raw: Optional[str], value_type: CvarType = CvarType.STRING):
    """Apply the decode belonging to ``value_type`` to a raw cvar string."""
    if value_type is CvarType.GAMETYPE:
        return decode_gametype(raw)
    return raw


class StatusVariant(Enum):
    """Which status reply format is being parsed."""
    PLAIN_STATUS = 'plain'
    RCON_STATUS = 'rcon'


@dataclass(frozen=True)
class QueryTarget:
    host: str
    port: int

    def as_address(self):
        return (self.host, self.port)

    def __str__(self):
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class QueryRequest:
    target: QueryTarget
    payload: str
    timeout: float = DEFAULT_REQUEST_TIMEOUT


@dataclass
class PlayerRecord:
    """A connected player.

    Plain status rows only carry score, ping and name. RCON status rows add
    the slot number, last message time, address, qport and rate. ``ping`` is
    None while the server reports the client as connecting or zombie.
    """
    score: int
    ping: Optional[int]
    name: str
    num: Optional[int] = None
    lastmsg: Optional[int] = None
    address: Optional[str] = None
    qport: Optional[int] = None
    rate: Optional[int] = None

    @property
    def clean_name(self) -> str:
        return strip_colors(self.name).strip()

    def to_dict(self) -> Dict[str, object]:
        data = {'score': self.score, 'ping': self.ping, 'name': self.name}
        if self.num is not None:
            data.update(num=self.num, lastmsg=self.lastmsg, address=self.address,
                        qport=self.qport, rate=self.rate)
        return data


@dataclass
class StatusDocument:
    variant: StatusVariant
    cvars: Dict[str, Optional[str]] = field(default_factory=dict)
    players: List[PlayerRecord] = field(default_factory=list)
    map_name: Optional[str] = None

    def cvar(self, name: str):
        """Return a known cvar decoded according to its declared type."""
        return decode_cvar(self.cvars.get(name), STATUS_FIELDS.get(name, CvarType.STRING))

    @property
    def hostname(self) -> Optional[str]:
        return self.cvars.get('sv_hostname')

    @property
    def gametype(self) -> Optional[GameType]:
        return decode_gametype(self.cvars.get('g_gametype'))

    def to_dict(self) -> Dict[str, object]:
        gametype = self.gametype
        return {
            'variant': self.variant.value,
            'cvars': dict(self.cvars),
            'map': self.map_name if self.variant is StatusVariant.RCON_STATUS else self.cvars.get('mapname'),
            'gametype': gametype.label if gametype is not None else None,
            'players': [player.to_dict() for player in self.players],
        }
