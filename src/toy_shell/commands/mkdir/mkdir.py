"""Mkdir command implementation.

Usage: mkdir [OPTION]... DIRECTORY...

Create the DIRECTORY(ies), if they do not already exist.

Options:
  -p    no error if existing, make parent directories as needed
  -v    print a message for each created directory
"""

from ...types import CommandContext, CommandResult, failure, ok


class MkdirCommand:
    """The mkdir command."""

    name = "mkdir"
    description = "Create directories"
    usage = "mkdir [-p] [-v] directory..."

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the mkdir command."""
        parents = False
        verbose = False
        directories: list[str] = []

        for arg in args:
            if arg.startswith("-") and arg != "-":
                for c in arg[1:]:
                    if c == "p":
                        parents = True
                    elif c == "v":
                        verbose = True
                    else:
                        return failure(f"mkdir: invalid option -- '{c}'\nUsage: {self.usage}")
            else:
                directories.append(arg)

        if not directories:
            return failure(f"mkdir: missing operand\nUsage: {self.usage}")

        output = ""
        for directory in directories:
            path = ctx.fs.resolve_path(ctx.state.cwd, directory)
            existed = await ctx.fs.exists(path)
            try:
                await ctx.fs.mkdir(path, recursive=parents)
            except FileExistsError:
                return failure(f"mkdir: cannot create directory '{directory}': File exists")
            except FileNotFoundError:
                return failure(f"mkdir: cannot create directory '{directory}': No such file or directory")
            except NotADirectoryError:
                return failure(f"mkdir: cannot create directory '{directory}': Not a directory")
            if verbose and not existed:
                output += f"mkdir: created directory '{directory}'\n"

        return ok(output)
