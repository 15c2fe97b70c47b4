"""Clear command implementation.

Usage: clear

Emit the ANSI sequence that clears a terminal screen.
"""

from ...types import CommandContext, CommandResult, failure, ok

CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


class ClearCommand:
    """The clear command."""

    name = "clear"
    description = "Clear the terminal screen"
    usage = "clear"

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the clear command."""
        if args:
            return failure(f"clear: too many arguments. Usage: {self.usage}")
        return ok(CLEAR_SEQUENCE)
