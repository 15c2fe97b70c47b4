"""Cat command implementation.

Usage: cat [FILE]...

Concatenate FILE(s) to standard output. With no FILE, read the input
redirected with <.
"""

from ...types import CommandContext, CommandResult, failure, ok


class CatCommand:
    """The cat command."""

    name = "cat"
    description = "Display file contents"
    usage = "cat [file...]"

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the cat command."""
        if not args:
            return ok(ctx.stdin)

        output = ""
        for arg in args:
            path = ctx.fs.resolve_path(ctx.state.cwd, arg)
            try:
                output += await ctx.fs.read_file(path)
            except FileNotFoundError:
                return failure(f"cat: {arg}: No such file or directory")
            except IsADirectoryError:
                return failure(f"cat: {arg}: Is a directory")
        return ok(output)
