"""Rm command implementation.

Usage: rm [-r] FILE...

Remove files. Directories are only removed with -r.

Options:
  -r, -R    remove directories and their contents recursively
"""

from ...types import CommandContext, CommandResult, failure, ok


class RmCommand:
    """The rm command."""

    name = "rm"
    description = "Remove files or directories"
    usage = "rm [-r] path..."

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the rm command."""
        recursive = False
        paths: list[str] = []

        for arg in args:
            if arg in ("-r", "-R"):
                recursive = True
            elif arg.startswith("-") and arg != "-":
                return failure(f"rm: invalid option -- '{arg[1:]}'")
            else:
                paths.append(arg)

        if not paths:
            return failure("rm: missing operand")

        for target in paths:
            path = ctx.fs.resolve_path(ctx.state.cwd, target)
            try:
                stat = await ctx.fs.stat(path)
            except FileNotFoundError:
                return failure(f"rm: cannot remove '{target}': No such file or directory")
            if stat.is_directory and not recursive:
                return failure(f"rm: cannot remove '{target}': Is a directory")
            await ctx.fs.rm(path, recursive=recursive)

        return ok()
