"""RCON command handling for the jka-query CLI."""

import asyncio

from jka_query.cli_helpers import add_common_arguments, fail, print_document
from jka_query.config import QuerySettings
from jka_query.errors import JkaQueryError
from jka_query.queries import rcon_command, rcon_status


def _add_password_argument(parser) -> None:
    parser.add_argument('--password', default=None,
                        help='RCON password (default: JKA_RCON_PASSWORD)')


class RconCommand:
    """Handles RCON command execution."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add RCON command parser to subparsers."""
        parser = subparsers.add_parser('rcon', help='Interface for RCON command execution')
        add_common_arguments(parser)
        _add_password_argument(parser)
        parser.add_argument('--exec', dest='command', required=True,
                            help='An RCON command to execute')
        parser.set_defaults(func=RconCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Execute an RCON command."""
        settings = QuerySettings()
        try:
            password = settings.rcon_password(args.password)
            output = asyncio.run(
                rcon_command(args.server, password, args.command, settings.timeout(args.timeout))
            )
        except JkaQueryError as exc:
            fail(exc)
            return
        print(output, end='' if output.endswith('\n') else '\n')


class RconStatusCommand:
    """Handles the rcon status table."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('rcon-status', help='Query map and player table over RCON')
        add_common_arguments(parser)
        _add_password_argument(parser)
        parser.add_argument('--json', action='store_true', help='Print the result as JSON')
        parser.set_defaults(func=RconStatusCommand.execute)

    @staticmethod
    def execute(args) -> None:
        settings = QuerySettings()
        try:
            password = settings.rcon_password(args.password)
            document = asyncio.run(rcon_status(args.server, password, settings.timeout(args.timeout)))
        except JkaQueryError as exc:
            fail(exc)
            return
        print_document(document, as_json=args.json)
