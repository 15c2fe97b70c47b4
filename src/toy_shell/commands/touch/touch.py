"""Touch command implementation.

Usage: touch [OPTION]... FILE...

Update the modification time of each FILE to the current time.
A FILE argument that does not exist is created empty.

Options:
  -c    do not create any files
"""

from ...types import CommandContext, CommandResult, failure, ok


class TouchCommand:
    """The touch command."""

    name = "touch"
    description = "Create empty files or update timestamps"
    usage = "touch [-c] file..."

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the touch command."""
        no_create = False
        files: list[str] = []

        for arg in args:
            if arg == "-c":
                no_create = True
            elif arg.startswith("-") and arg != "-":
                return failure(f"touch: invalid option -- '{arg[1:]}'\nUsage: {self.usage}")
            else:
                files.append(arg)

        if not files:
            return failure(f"touch: missing file operand\nUsage: {self.usage}")

        for file in files:
            path = ctx.fs.resolve_path(ctx.state.cwd, file)
            if no_create and not await ctx.fs.exists(path):
                continue
            try:
                await ctx.fs.touch(path)
            except (FileNotFoundError, NotADirectoryError):
                return failure(f"touch: cannot touch '{file}': No such file or directory")

        return ok()
