"""Pwd command implementation.

Usage: pwd

Print the name of the current working directory.
"""

from ...types import CommandContext, CommandResult, failure, ok


class PwdCommand:
    """The pwd command."""

    name = "pwd"
    description = "Print working directory"
    usage = "pwd"

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the pwd command."""
        if args:
            return failure(f"pwd: too many arguments. Usage: {self.usage}")
        return ok(f"{ctx.state.cwd}\n")
