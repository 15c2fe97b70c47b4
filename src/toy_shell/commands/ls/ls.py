"""Ls command implementation.

Usage: ls [OPTION]... [PATH]

List directory contents. Directories are listed before files and are
shown with a trailing slash.

Options:
  -a    do not ignore entries starting with .
  -l    use a long listing format
  -r    reverse order while sorting
  -S    sort by file size
  -t    sort by modification time
"""

import time
from dataclasses import dataclass

from ...types import CommandContext, CommandResult, failure, ok


@dataclass
class _Entry:
    name: str
    is_directory: bool
    size: int
    mtime: float


class LsCommand:
    """The ls command."""

    name = "ls"
    description = "List directory contents"
    usage = "ls [-l] [-a] [-r] [-S] [-t] [path]"

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the ls command."""
        show_all = False
        long_format = False
        reverse = False
        sort_by = "name"
        paths: list[str] = []

        for arg in args:
            if arg.startswith("-") and arg != "-":
                for c in arg[1:]:
                    if c == "a":
                        show_all = True
                    elif c == "l":
                        long_format = True
                    elif c == "r":
                        reverse = True
                    elif c == "S":
                        sort_by = "size"
                    elif c == "t":
                        sort_by = "mtime"
                    else:
                        return failure(f"ls: invalid option -- '{c}'")
            else:
                paths.append(arg)

        target = paths[0] if paths else "."
        path = ctx.fs.resolve_path(ctx.state.cwd, target)
        try:
            stat = await ctx.fs.stat(path)
        except FileNotFoundError:
            return failure(f"ls: cannot access '{target}': No such file or directory")

        if stat.is_file:
            entries = [_Entry(target, False, stat.size, stat.mtime)]
        else:
            entries = []
            for name in await ctx.fs.readdir(path):
                if name.startswith(".") and not show_all:
                    continue
                child = await ctx.fs.stat(ctx.fs.resolve_path(path, name))
                entries.append(_Entry(name, child.is_directory, child.size, child.mtime))

        entries = self._sort(entries, sort_by, reverse)
        if not entries:
            return ok()
        if long_format:
            lines = [self._format_long(entry) for entry in entries]
        else:
            lines = [self._display_name(entry) for entry in entries]
        return ok("\n".join(lines) + "\n")

    def _sort(self, entries: list[_Entry], sort_by: str, reverse: bool) -> list[_Entry]:
        if sort_by == "size":
            key = lambda e: (not e.is_directory, e.size, e.name)  # noqa: E731
        elif sort_by == "mtime":
            key = lambda e: (not e.is_directory, e.mtime, e.name)  # noqa: E731
        else:
            key = lambda e: (not e.is_directory, e.name)  # noqa: E731
        ordered = sorted(entries, key=key)
        if reverse:
            directories = [e for e in ordered if e.is_directory]
            files = [e for e in ordered if not e.is_directory]
            ordered = directories[::-1] + files[::-1]
        return ordered

    def _display_name(self, entry: _Entry) -> str:
        return f"{entry.name}/" if entry.is_directory else entry.name

    def _format_long(self, entry: _Entry) -> str:
        kind = "d" if entry.is_directory else "-"
        size = "" if entry.is_directory else str(entry.size)
        mtime = time.strftime("%Y-%m-%d %H:%M", time.localtime(entry.mtime))
        return f"{kind} {size:>8} {mtime} {self._display_name(entry)}"
