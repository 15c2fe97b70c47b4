"""Cd command implementation.

Usage: cd [DIR]

Change the working directory. With no DIR or ``~``, change to ``/``;
``-`` changes to the previous directory.
"""

from ...types import CommandContext, CommandResult, failure, ok

HOME = "/"


class CdCommand:
    """The cd command."""

    name = "cd"
    description = "Change directory"
    usage = "cd [path]"

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the cd command."""
        if len(args) > 1:
            return failure("cd: too many arguments")

        target = args[0] if args else "~"
        if target == "~":
            path = HOME
        elif target == "-":
            path = ctx.state.previous_dir
        else:
            path = ctx.fs.resolve_path(ctx.state.cwd, target)

        try:
            stat = await ctx.fs.stat(path)
        except FileNotFoundError:
            return failure(f"cd: {target}: No such file or directory")
        if not stat.is_directory:
            return failure(f"cd: {target}: Not a directory")

        ctx.state.previous_dir = ctx.state.cwd
        ctx.state.cwd = path
        return ok()
