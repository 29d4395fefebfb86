"""
Command Line Interface for JKA Query.

Provides CLI commands for status queries, RCON and scheduled polling.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cli_commands import COMMANDS
from .constants import ExitCodes
from .logging_config import configure_logging, get_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='jka-query',
        description='Query Jedi Academy / Quake3 family game servers over UDP'
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging (overrides JKA_LOG_LEVEL)')
    parser.add_argument('--trace-packets', action='store_true',
                        help='Log every query and reply datagram')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    # If no arguments provided, show help
    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    configure_logging(
        logging.DEBUG if parsed_args.verbose else None,
        trace_packets=parsed_args.trace_packets,
    )
    get_logger(__name__).debug("Parsed arguments: %s", parsed_args)

    # Execute the appropriate command
    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
