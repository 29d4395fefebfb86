"""
Custom exception classes for JKA Query.

Every error carries an :class:`ErrorKind` tag and a human readable detail so
callers can branch on ``exc.kind`` instead of matching message strings.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Error taxonomy shared by all query errors."""
    PARAMETER = 'parameter'
    FORMAT = 'format'
    RANGE = 'range'
    TIMEOUT = 'timeout'
    STRUCTURE = 'structure'
    NETWORK = 'network'
    AUTHENTICATION = 'authentication'


class JkaQueryError(Exception):
    """Base exception class for JKA Query errors."""
    kind = None

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __repr__(self):
        return f"{type(self).__name__}(kind={self.kind.value if self.kind else None!r}, detail={self.detail!r})"


class ParameterError(JkaQueryError, ValueError):
    """Raised when a required parameter is missing or invalid."""
    kind = ErrorKind.PARAMETER


class FormatError(JkaQueryError, ValueError):
    """Raised when a server address is not in ``host:port`` form."""
    kind = ErrorKind.FORMAT


class PortRangeError(JkaQueryError, ValueError):
    """Raised when a port lies outside the accepted range."""
    kind = ErrorKind.RANGE


class QueryTimeoutError(JkaQueryError):
    """Raised when no reply arrives before the deadline."""
    kind = ErrorKind.TIMEOUT


class StructureError(JkaQueryError):
    """Raised when a reply cannot contain a valid document."""
    kind = ErrorKind.STRUCTURE


class QueryNetworkError(JkaQueryError):
    """Raised when the UDP endpoint cannot be opened."""
    kind = ErrorKind.NETWORK


class RconAuthenticationError(JkaQueryError):
    """Raised when the server rejects the RCON password."""
    kind = ErrorKind.AUTHENTICATION


class RconPasswordNotFoundError(ParameterError):
    """Raised when no RCON password was given or configured."""
    pass
