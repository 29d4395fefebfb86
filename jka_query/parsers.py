"""
Status reply parsing for JKA Query.

Two reply formats are understood:

* ``getstatus`` replies: an out-of-band ``statusResponse`` header, one
  backslash-delimited line of cvar name/value pairs, then one
  ``score ping "name"`` line per player.
* ``rcon status`` replies: one or more ``print`` headers (one per datagram)
  followed by a console table::

    map: mp/ffa3
    num score ping name            lastmsg address               qport rate
    --- ----- ---- --------------- ------- --------------------- ----- -----
      0     5   48 Padawan^7             0 10.0.0.7:29071        1234 25000

Both parsers degrade gracefully on optional content: unknown cvars are ignored
and malformed player rows are skipped.
"""

import re
from typing import Dict, List, Optional, Tuple

from .constants import (
    PRINT_RESPONSE_TAG,
    STATUS_FIELDS,
    STATUS_RESPONSE_TAG,
    CvarType,
)
from .errors import ParameterError, StructureError
from .logging_config import get_logger
from .models import PlayerRecord, StatusDocument, StatusVariant, decode_cvar

logger = get_logger(__name__)

# 0xFF decoded byte-per-character, or the replacement character a lossy
# UTF-8 decode would leave in its place.
_HEADER_CHARS = '\xff\ufffd'
_PRINT_HEADER = re.compile('[' + _HEADER_CHARS + ']{4}' + PRINT_RESPONSE_TAG + '\n')
_MAP_LINE = re.compile(r'map:\s+(.+)')

# rcon status shows these instead of a ping for clients not yet active
_NON_NUMERIC_PINGS = ('CNCT', 'ZMBI')


def strip_oob_header(text: str, tag: str = STATUS_RESPONSE_TAG) -> str:
    """Remove a leading out-of-band header and ``tag`` line when present."""
    body = text.lstrip(_HEADER_CHARS)
    if body.startswith(tag + '\n'):
        return body[len(tag) + 1:]
    if body == tag:
        return ''
    return body


def strip_print_headers(text: str) -> str:
    """Remove every ``print`` header; each reply datagram carries its own."""
    return _PRINT_HEADER.sub('', text).lstrip(_HEADER_CHARS)


def _info_tokens(info_line: str) -> List[str]:
    tokens = info_line.rstrip('\r').split('\\')
    if tokens and tokens[0] == '':
        tokens = tokens[1:]
    return tokens


def parse_cvar_pairs(info_line: str) -> Dict[str, str]:
    """Split a backslash-delimited info line into a name/value mapping.

    A trailing name without a value is dropped; the first occurrence of a
    repeated name wins.
    """
    tokens = _info_tokens(info_line)
    pairs: Dict[str, str] = {}
    for index in range(0, len(tokens) - 1, 2):
        pairs.setdefault(tokens[index], tokens[index + 1])
    return pairs


def _lookup(pairs: Dict[str, str], name: str) -> Optional[str]:
    if name in pairs:
        return pairs[name]
    # Cvar names are case-insensitive on the server side
    lowered = name.lower()
    for key, value in pairs.items():
        if key.lower() == lowered:
            return value
    return None


def parse_cvar_value(text: str, name: str, value_type: CvarType = CvarType.STRING):
    """
    Extract one cvar from a status reply.

    Args:
        text: Status reply, with or without its out-of-band header
        name: Cvar name to look for
        value_type: Decode applied to the raw value

    Returns:
        The decoded value, or None when the cvar is absent
    """
    info_line = strip_oob_header(text).split('\n', 1)[0]
    return decode_cvar(_lookup(parse_cvar_pairs(info_line), name), value_type)


def parse_player_line(line: str) -> Optional[PlayerRecord]:
    """Parse a ``score ping "name"`` line; returns None when malformed."""
    fields = line.strip().split(None, 2)
    if len(fields) != 3:
        return None
    score_text, ping_text, name = fields
    try:
        score = int(score_text)
        ping = int(ping_text)
    except ValueError:
        return None
    if len(name) >= 2 and name[0] == '"' and name[-1] == '"':
        name = name[1:-1]
    return PlayerRecord(score=score, ping=ping, name=name)


def _split_rcon_row(line: str) -> Optional[Tuple[str, ...]]:
    head = line.split(None, 3)
    if len(head) != 4:
        return None
    tail = head[3].rsplit(None, 4)
    if len(tail) != 5:
        return None
    return tuple(head[:3]) + tuple(tail)


def parse_rcon_player_row(line: str) -> Optional[PlayerRecord]:
    """Parse one row of the rcon status table; returns None when malformed."""
    fields = _split_rcon_row(line)
    if fields is None:
        return None
    num, score, ping, name, lastmsg, address, qport, rate = fields
    try:
        parsed_ping = None if ping in _NON_NUMERIC_PINGS else int(ping)
        return PlayerRecord(
            score=int(score),
            ping=parsed_ping,
            name=name.strip(),
            num=int(num),
            lastmsg=int(lastmsg),
            address=address,
            qport=int(qport),
            rate=int(rate),
        )
    except ValueError:
        return None


def parse_plain_status(raw: str) -> StatusDocument:
    """Parse a ``getstatus`` reply."""
    lines = strip_oob_header(raw).split('\n')
    pairs = parse_cvar_pairs(lines[0])
    cvars = {name: _lookup(pairs, name) for name in STATUS_FIELDS}

    players: List[PlayerRecord] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        player = parse_player_line(line)
        if player is None:
            logger.debug("Skipping malformed player line: %r", line)
            continue
        players.append(player)

    return StatusDocument(StatusVariant.PLAIN_STATUS, cvars=cvars, players=players)


def parse_rcon_status(raw: str) -> StatusDocument:
    """
    Parse the output of the ``status`` rcon command.

    Raises:
        StructureError: If the reply has fewer than two lines
    """
    lines = strip_print_headers(raw).split('\n')
    if len(lines) < 2:
        raise StructureError('No information provided!')

    map_name: Optional[str] = None
    players: List[PlayerRecord] = []
    for line in lines:
        text = line.strip()
        if not text or text.startswith('-') or text.startswith('num'):
            continue
        if text.startswith('map:'):
            match = _MAP_LINE.match(text)
            map_name = match.group(1).strip() if match else None
            continue
        player = parse_rcon_player_row(text)
        if player is None:
            logger.debug("Skipping malformed rcon status row: %r", line)
            continue
        players.append(player)

    return StatusDocument(StatusVariant.RCON_STATUS, players=players, map_name=map_name)


def parse_status(raw: str, variant: StatusVariant = StatusVariant.PLAIN_STATUS) -> StatusDocument:
    """Parse a status reply of the given variant into a StatusDocument."""
    if variant is StatusVariant.PLAIN_STATUS:
        return parse_plain_status(raw)
    if variant is StatusVariant.RCON_STATUS:
        return parse_rcon_status(raw)
    raise ParameterError(f"Unknown status variant: {variant!r}")


__all__ = [
    "parse_cvar_pairs",
    "parse_cvar_value",
    "parse_player_line",
    "parse_plain_status",
    "parse_rcon_player_row",
    "parse_rcon_status",
    "parse_status",
    "strip_oob_header",
    "strip_print_headers",
]
