"""Scheduled status polling for the jka-query CLI."""

import asyncio

from jka_query.cli_helpers import add_common_arguments, exit_with_error, fail
from jka_query.config import QuerySettings
from jka_query.constants import ExitCodes
from jka_query.errors import JkaQueryError
from jka_query.monitor import CronSchedule, run_monitor


class WatchCommand:
    """Polls a server's status on a cron schedule."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('watch', help='Poll server status on a cron schedule')
        add_common_arguments(parser)
        parser.add_argument('--cron', default='* * * * *',
                            help='Cron expression for poll times (default: every minute)')
        parser.add_argument('--count', type=int, default=None,
                            help='Stop after this many polls (default: run forever)')
        parser.set_defaults(func=WatchCommand.execute)

    @staticmethod
    def execute(args) -> None:
        settings = QuerySettings()
        try:
            CronSchedule(args.cron)
        except ValueError as exc:
            exit_with_error(f"Invalid cron expression '{args.cron}': {exc}", ExitCodes.INVALID_PARAMETER)

        try:
            asyncio.run(run_monitor(args.server, args.cron, settings.timeout(args.timeout), args.count))
        except JkaQueryError as exc:
            fail(exc)
        except KeyboardInterrupt:
            pass
