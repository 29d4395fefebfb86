"""Shared CLI helpers for jka-query commands."""

import argparse
import json
import sys
from typing import Optional

from jka_query.constants import ExitCodes
from jka_query.errors import ErrorKind, JkaQueryError, RconPasswordNotFoundError
from jka_query.models import StatusDocument

_KIND_EXIT_CODES = {
    ErrorKind.PARAMETER: ExitCodes.INVALID_PARAMETER,
    ErrorKind.FORMAT: ExitCodes.INVALID_SERVER_FORMAT,
    ErrorKind.RANGE: ExitCodes.PORT_OUT_OF_RANGE,
    ErrorKind.TIMEOUT: ExitCodes.NO_RESPONSE,
    ErrorKind.STRUCTURE: ExitCodes.MALFORMED_REPLY,
    ErrorKind.NETWORK: ExitCodes.NETWORK_ERROR,
    ErrorKind.AUTHENTICATION: ExitCodes.RCON_PASSWORD_WRONG,
}


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to jka-query exit codes."""
    if isinstance(exc, RconPasswordNotFoundError):
        return ExitCodes.RCON_PASSWORD_NOT_FOUND
    if isinstance(exc, JkaQueryError):
        return _KIND_EXIT_CODES.get(exc.kind)
    return None


def fail(exc: Exception) -> None:
    """Exit with the message and code belonging to ``exc``."""
    exit_code = map_exception_to_exit_code(exc)
    if exit_code is None:
        exit_with_error(f"Query failed: {exc}", ExitCodes.QUERY_FAILED)
    exit_with_error(str(exc), exit_code)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every query command."""
    parser.add_argument('server', help='Server address as host:port')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Overall timeout in seconds (default: JKA_QUERY_TIMEOUT or 10)')


def print_document(document: StatusDocument, as_json: bool = False) -> None:
    """Render a status document for the terminal."""
    if as_json:
        print(json.dumps(document.to_dict(), indent=2))
        return

    summary = document.to_dict()
    if document.hostname is not None:
        print(f"Host:     {document.hostname}")
    print(f"Map:      {summary['map'] or '-'}")
    if summary['gametype'] is not None:
        print(f"Gametype: {summary['gametype']}")
    print(f"Players:  {len(document.players)}")
    for player in document.players:
        ping = player.ping if player.ping is not None else '-'
        print(f"  {player.score:>5} {ping:>5}  {player.clean_name}")
