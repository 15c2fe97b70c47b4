"""Main Shell class - the primary API for toy-shell.

Example usage:
    from toy_shell import Shell

    # Synchronous usage (for REPL, scripts)
    shell = Shell()
    result = shell.run("echo hello world")
    print(result.output)  # "hello world\n"

    # Scripts
    output = shell.run_script("for i in 1 2 3 do echo $i done")
    print(output)  # "1\n2\n3\n"

    # Async usage (for async applications)
    shell = Shell()
    result = await shell.exec("echo hello world")
    output = await shell.interpret("if a == a then echo yes fi")

    # With initial files
    shell = Shell(files={"/notes.txt": "hello\\n"})
    result = shell.run("cat notes.txt")
"""

import asyncio
from typing import Optional

import nest_asyncio  # type: ignore[import-untyped]

from .commands import create_command_registry
from .executor import CommandExecutor
from .fs import InMemoryFs
from .interpreter import Environment, ScriptInterpreter
from .types import Command, CommandResult, ExecutionLimits, ShellState


def _run_sync(coro):
    try:
        asyncio.get_running_loop()
        # We're in an existing event loop (Jupyter, async framework, etc.)
        # Apply nest_asyncio to allow nested event loops
        nest_asyncio.apply()
    except RuntimeError:
        # No running event loop, asyncio.run() will work fine
        pass
    return asyncio.run(coro)


class Shell:
    """Toy shell.

    Ties together an in-memory file tree, the built-in commands, the
    command executor and the script interpreter.
    """

    def __init__(
        self,
        *,
        fs: Optional[InMemoryFs] = None,
        files: Optional[dict[str, str]] = None,
        cwd: str = "/",
        env: Optional[dict[str, str]] = None,
        limits: Optional[ExecutionLimits] = None,
        commands: Optional[dict[str, Command]] = None,
    ):
        """Initialize the shell.

        Args:
            fs: Filesystem to use. If not provided, creates an InMemoryFs.
            files: Initial files to create (requires default InMemoryFs).
            cwd: Initial working directory.
            env: Variables every script run starts with.
            limits: Execution limits for scripts.
            commands: Custom command registry. If not provided, uses built-in commands.
        """
        if fs is not None:
            self._fs = fs
        else:
            self._fs = InMemoryFs(initial_files=files or {})

        self._limits = limits or ExecutionLimits()
        self._env = dict(env or {})
        self._executor = CommandExecutor(
            fs=self._fs,
            commands=commands or create_command_registry(),
            state=ShellState(cwd=cwd, previous_dir=cwd),
            limits=self._limits,
            env=self._env,
        )

    @property
    def fs(self) -> InMemoryFs:
        """Get the filesystem."""
        return self._fs

    @property
    def cwd(self) -> str:
        """Get the current working directory."""
        return self._executor.state.cwd

    @property
    def commands(self) -> dict[str, Command]:
        """Get the command registry."""
        return self._executor.commands

    @property
    def executor(self) -> CommandExecutor:
        """Get the command executor."""
        return self._executor

    def create_interpreter(self) -> ScriptInterpreter:
        """Create a script interpreter with a fresh environment."""
        return ScriptInterpreter(
            self._executor,
            environment=Environment(variables=dict(self._env)),
            limits=self._limits,
        )

    async def exec(self, command_line: str) -> CommandResult:
        """Execute a single command line."""
        return await self._executor.execute(command_line)

    async def interpret(self, script: str) -> str:
        """Run a script and return its accumulated output.

        Raises:
            ScriptError: If the script is malformed.
        """
        return await self.create_interpreter().interpret(script)

    def run(self, command_line: str) -> CommandResult:
        """Execute a single command line synchronously.

        Example:
            >>> shell = Shell()
            >>> print(shell.run("echo Hello").output)
            Hello
        """
        return _run_sync(self.exec(command_line))

    def run_script(self, script: str) -> str:
        """Run a script synchronously."""
        return _run_sync(self.interpret(script))
