"""
Constants and exit codes for JKA Query.
"""

from enum import Enum, IntEnum

# Timing (seconds)
DEFAULT_REQUEST_TIMEOUT = 10
MIN_REQUEST_TIMEOUT = 2
QUIET_PERIOD = 2

MIN_PORT = 1
MAX_PORT = 65534

# Out-of-band framing
OOB_PREFIX = b'\xff\xff\xff\xff'
STATUS_RESPONSE_TAG = 'statusResponse'
PRINT_RESPONSE_TAG = 'print'
BAD_RCON_PASSWORD_REPLY = 'Bad rconpassword.'


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    INVALID_PARAMETER = 1
    INVALID_SERVER_FORMAT = 2
    PORT_OUT_OF_RANGE = 3
    NO_RESPONSE = 4
    MALFORMED_REPLY = 5
    RCON_PASSWORD_NOT_FOUND = 6
    RCON_PASSWORD_WRONG = 7
    NETWORK_ERROR = 8
    QUERY_FAILED = 9


class CvarType(Enum):
    """How a raw cvar value is decoded."""
    STRING = 'string'
    GAMETYPE = 'gametype'


class GameType(IntEnum):
    """Values of the ``g_gametype`` cvar."""
    FFA = 0
    HOLOCRON = 1
    JEDI_MASTER = 2
    DUEL = 3
    POWER_DUEL = 4
    SINGLE_PLAYER = 5
    TEAM_FFA = 6
    SIEGE = 7
    CTF = 8
    CTY = 9

    @property
    def label(self) -> str:
        return _GAMETYPE_LABELS[self]


_GAMETYPE_LABELS = {
    GameType.FFA: 'Free For All',
    GameType.HOLOCRON: 'Holocron FFA',
    GameType.JEDI_MASTER: 'Jedi Master',
    GameType.DUEL: 'Duel',
    GameType.POWER_DUEL: 'Power Duel',
    GameType.SINGLE_PLAYER: 'Single Player',
    GameType.TEAM_FFA: 'Team FFA',
    GameType.SIEGE: 'Siege',
    GameType.CTF: 'Capture The Flag',
    GameType.CTY: 'Capture The Ysalamiri',
}


# Cvars extracted from a getstatus reply, with their decode type.
STATUS_FIELDS = {
    'sv_hostname': CvarType.STRING,
    'mapname': CvarType.STRING,
    'g_gametype': CvarType.GAMETYPE,
    'sv_maxclients': CvarType.STRING,
    'sv_privateClients': CvarType.STRING,
    'g_needpass': CvarType.STRING,
    'gamename': CvarType.STRING,
    'fs_game': CvarType.STRING,
    'version': CvarType.STRING,
    'protocol': CvarType.STRING,
    'fraglimit': CvarType.STRING,
    'timelimit': CvarType.STRING,
    'capturelimit': CvarType.STRING,
    'duel_fraglimit': CvarType.STRING,
    'g_maxForceRank': CvarType.STRING,
    'g_forcePowerDisable': CvarType.STRING,
    'g_weaponDisable': CvarType.STRING,
    'sv_floodProtect': CvarType.STRING,
}
