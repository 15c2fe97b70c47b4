"""Built-in command catalog for toy-shell."""

from ..types import Command
from .cat import CatCommand
from .cd import CdCommand
from .clear import ClearCommand
from .echo import EchoCommand
from .help import HelpCommand
from .ls import LsCommand
from .mkdir import MkdirCommand
from .pwd import PwdCommand
from .rm import RmCommand
from .script import ScriptCommand
from .touch import TouchCommand

COMMAND_CLASSES = (
    CatCommand,
    CdCommand,
    ClearCommand,
    EchoCommand,
    HelpCommand,
    LsCommand,
    MkdirCommand,
    PwdCommand,
    RmCommand,
    ScriptCommand,
    TouchCommand,
)


def create_command_registry() -> dict[str, Command]:
    """Create a registry of all built-in commands, keyed by name."""
    commands = [cls() for cls in COMMAND_CLASSES]
    return {command.name: command for command in commands}


__all__ = [
    "COMMAND_CLASSES",
    "CatCommand",
    "CdCommand",
    "ClearCommand",
    "EchoCommand",
    "HelpCommand",
    "LsCommand",
    "MkdirCommand",
    "PwdCommand",
    "RmCommand",
    "ScriptCommand",
    "TouchCommand",
    "create_command_registry",
]
