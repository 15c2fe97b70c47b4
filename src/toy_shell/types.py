"""Shared types for toy-shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from .fs import InMemoryFs


@dataclass(frozen=True)
class CommandResult:
    """Result of executing one command line."""

    succeeded: bool
    """Whether the command completed successfully."""

    output: str = ""
    """Textual output; commands include their own trailing newlines."""

    error_message: Optional[str] = None
    """Description of the failure when ``succeeded`` is False."""


def ok(output: str = "") -> CommandResult:
    """Create a successful result."""
    return CommandResult(succeeded=True, output=output)


def failure(message: str) -> CommandResult:
    """Create a failed result."""
    return CommandResult(succeeded=False, output="", error_message=message)


@dataclass
class ExecutionLimits:
    """Execution limits for script runs."""

    max_loop_iterations: Optional[int] = None
    """Maximum iterations of a single for/while loop. None means unbounded."""


@dataclass
class ShellState:
    """Mutable state shared by the commands of one shell."""

    cwd: str = "/"
    """Current working directory."""

    previous_dir: str = "/"
    """Previous directory (for cd -)."""


class ICommandExecutor(Protocol):
    """The command-execution contract consumed by the script interpreter."""

    async def execute(self, command_line: str) -> CommandResult:
        ...


class Command(Protocol):
    """A built-in command."""

    name: str
    description: str
    usage: str

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        ...


@dataclass
class CommandContext:
    """Context provided to commands."""

    fs: "InMemoryFs"
    """Virtual file tree."""

    state: ShellState
    """Mutable shell state (working directory)."""

    commands: dict[str, Command] = field(default_factory=dict)
    """Command registry, for commands that inspect other commands."""

    executor: Optional[ICommandExecutor] = None
    """Executor for commands that run further command lines."""

    stdin: str = ""
    """Input redirected with ``<``."""

    limits: ExecutionLimits = field(default_factory=ExecutionLimits)
    """Execution limits for scripts the command runs."""

    env: dict[str, str] = field(default_factory=dict)
    """Variables a script run by the command starts with."""
