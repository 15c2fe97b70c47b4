"""Command executor.

Implements the command-execution contract used by the script interpreter:
a command line goes in, a ``CommandResult`` comes out. The executor splits
the line on whitespace, resolves ``<``, ``>`` and ``>>`` redirections
against the virtual file tree and runs the named command.
"""

import logging
from typing import Optional

from .fs import InMemoryFs
from .types import (
    Command,
    CommandContext,
    CommandResult,
    ExecutionLimits,
    ShellState,
    failure,
    ok,
)

logger = logging.getLogger(__name__)

REDIRECT_OPERATORS = frozenset({"<", ">", ">>"})


class CommandExecutor:
    """Runs command lines against a command registry."""

    def __init__(
        self,
        fs: InMemoryFs,
        commands: dict[str, Command],
        state: Optional[ShellState] = None,
        *,
        limits: Optional[ExecutionLimits] = None,
        env: Optional[dict[str, str]] = None,
    ):
        self.fs = fs
        self.commands = commands
        self.state = state or ShellState()
        # Handed to commands that run scripts (script)
        self.limits = limits or ExecutionLimits()
        self.env = dict(env or {})

    def available_commands(self) -> list[str]:
        """Names of all registered commands, sorted."""
        return sorted(self.commands)

    async def execute(self, command_line: str) -> CommandResult:
        """Execute one command line."""
        parts = command_line.split()
        if not parts:
            return ok()

        name = parts[0].lower()
        command = self.commands.get(name)
        if command is None:
            return failure(f"Command not found: {name}")

        args: list[str] = []
        stdin = ""
        output_target: Optional[tuple[str, bool]] = None

        i = 1
        while i < len(parts):
            arg = parts[i]
            if arg not in REDIRECT_OPERATORS:
                args.append(arg)
                i += 1
                continue
            if i + 1 >= len(parts):
                return failure(f"{name}: no file specified for redirection '{arg}'")
            path = self.fs.resolve_path(self.state.cwd, parts[i + 1])
            if arg == "<":
                try:
                    stdin = await self.fs.read_file(path)
                except OSError as e:
                    return failure(f"{name}: {e}")
            else:
                output_target = (path, arg == ">>")
            i += 2

        ctx = CommandContext(
            fs=self.fs,
            state=self.state,
            commands=self.commands,
            executor=self,
            stdin=stdin,
            limits=self.limits,
            env=self.env,
        )

        try:
            result = await command.execute(args, ctx)
            if output_target is not None and result.succeeded:
                path, append = output_target
                if append:
                    await self.fs.append_file(path, result.output)
                else:
                    await self.fs.write_file(path, result.output)
                result = ok()
        except OSError as e:
            logger.debug("%s raised %r", name, e)
            return failure(f"{name}: {e}")

        return result
