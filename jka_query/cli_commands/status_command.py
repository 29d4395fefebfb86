"""getstatus handling for the jka-query CLI."""

import asyncio

from jka_query.cli_helpers import add_common_arguments, fail, print_document
from jka_query.config import QuerySettings
from jka_query.errors import JkaQueryError
from jka_query.queries import get_status


class StatusCommand:
    """Handles public status queries."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add status command parser to subparsers."""
        parser = subparsers.add_parser('status', help='Query server cvars and players (getstatus)')
        add_common_arguments(parser)
        parser.add_argument('--json', action='store_true', help='Print the result as JSON')
        parser.set_defaults(func=StatusCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Query and print the server status."""
        settings = QuerySettings()
        try:
            document = asyncio.run(get_status(args.server, settings.timeout(args.timeout)))
        except JkaQueryError as exc:
            fail(exc)
            return
        print_document(document, as_json=args.json)
