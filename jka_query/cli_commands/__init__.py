"""Registry for CLI subcommands."""

from .rcon_command import RconCommand, RconStatusCommand
from .status_command import StatusCommand
from .watch_command import WatchCommand

COMMANDS = (
    StatusCommand,
    RconStatusCommand,
    RconCommand,
    WatchCommand,
)

__all__ = ["COMMANDS", "StatusCommand", "RconStatusCommand", "RconCommand", "WatchCommand"]
