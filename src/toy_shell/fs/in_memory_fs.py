"""In-memory virtual file tree.

Paths are absolute and normalized; every entry lives in a flat mapping
keyed by its path. The root directory always exists.
"""

import time
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class FileEntry:
    """A regular file."""

    content: str = ""
    mtime: float = field(default_factory=time.time)


@dataclass
class DirectoryEntry:
    """A directory. Children are derived from the paths beneath it."""

    mtime: float = field(default_factory=time.time)


FsEntry = Union[FileEntry, DirectoryEntry]


@dataclass(frozen=True)
class FsStat:
    """Information about a path."""

    is_file: bool
    is_directory: bool
    size: int
    mtime: float


def normalize_path(path: str) -> str:
    """Collapse ``.``, ``..`` and repeated slashes in an absolute path."""
    stack: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if stack:
                stack.pop()
        else:
            stack.append(part)
    return "/" + "/".join(stack)


def dirname(path: str) -> str:
    """Parent directory of a normalized absolute path."""
    if path == "/":
        return "/"
    parent = path.rsplit("/", 1)[0]
    return parent or "/"


def basename(path: str) -> str:
    """Final component of a normalized absolute path."""
    return path.rsplit("/", 1)[-1]


class InMemoryFs:
    """Virtual file tree held entirely in memory."""

    def __init__(self, initial_files: Optional[dict[str, str]] = None):
        self._data: dict[str, FsEntry] = {"/": DirectoryEntry()}
        for path, content in (initial_files or {}).items():
            self._seed_file(normalize_path(path), content)

    def _seed_file(self, path: str, content: str) -> None:
        parent = dirname(path)
        missing: list[str] = []
        while parent not in self._data:
            missing.append(parent)
            parent = dirname(parent)
        for directory in reversed(missing):
            self._data[directory] = DirectoryEntry()
        self._data[path] = FileEntry(content=content)

    def resolve_path(self, base: str, path: str) -> str:
        """Resolve ``path`` relative to ``base`` into a normalized absolute path."""
        if path.startswith("/"):
            return normalize_path(path)
        return normalize_path(f"{base}/{path}")

    def _get(self, path: str) -> FsEntry:
        entry = self._data.get(path)
        if entry is None:
            raise FileNotFoundError(f"No such file or directory: {path}")
        return entry

    def _require_parent_dir(self, path: str) -> None:
        parent = dirname(path)
        entry = self._data.get(parent)
        if entry is None:
            raise FileNotFoundError(f"No such file or directory: {parent}")
        if not isinstance(entry, DirectoryEntry):
            raise NotADirectoryError(f"Not a directory: {parent}")

    def _children(self, path: str) -> list[str]:
        prefix = "/" if path == "/" else path + "/"
        return [
            p for p in self._data
            if p != "/" and p.startswith(prefix) and "/" not in p[len(prefix):]
        ]

    async def exists(self, path: str) -> bool:
        """Check whether a path exists."""
        return path in self._data

    async def stat(self, path: str) -> FsStat:
        """Stat a path."""
        entry = self._get(path)
        if isinstance(entry, FileEntry):
            return FsStat(is_file=True, is_directory=False, size=len(entry.content), mtime=entry.mtime)
        return FsStat(is_file=False, is_directory=True, size=0, mtime=entry.mtime)

    async def read_file(self, path: str) -> str:
        """Read a file's content."""
        entry = self._get(path)
        if isinstance(entry, DirectoryEntry):
            raise IsADirectoryError(f"Is a directory: {path}")
        return entry.content

    async def write_file(self, path: str, content: str) -> None:
        """Create or overwrite a file."""
        entry = self._data.get(path)
        if isinstance(entry, DirectoryEntry):
            raise IsADirectoryError(f"Is a directory: {path}")
        self._require_parent_dir(path)
        self._data[path] = FileEntry(content=content)

    async def append_file(self, path: str, content: str) -> None:
        """Append to a file, creating it if needed."""
        entry = self._data.get(path)
        if isinstance(entry, FileEntry):
            entry.content += content
            entry.mtime = time.time()
            return
        await self.write_file(path, content)

    async def touch(self, path: str) -> None:
        """Refresh a path's mtime, creating an empty file if it is missing."""
        entry = self._data.get(path)
        if entry is None:
            await self.write_file(path, "")
        else:
            entry.mtime = time.time()

    async def mkdir(self, path: str, recursive: bool = False) -> None:
        """Create a directory."""
        entry = self._data.get(path)
        if entry is not None:
            if recursive and isinstance(entry, DirectoryEntry):
                return
            raise FileExistsError(f"File exists: {path}")
        if recursive:
            parent = dirname(path)
            if parent not in self._data:
                await self.mkdir(parent, recursive=True)
        self._require_parent_dir(path)
        self._data[path] = DirectoryEntry()

    async def readdir(self, path: str) -> list[str]:
        """List the names in a directory, sorted."""
        entry = self._get(path)
        if not isinstance(entry, DirectoryEntry):
            raise NotADirectoryError(f"Not a directory: {path}")
        return sorted(basename(p) for p in self._children(path))

    async def rm(self, path: str, recursive: bool = False) -> None:
        """Remove a file or directory."""
        if path == "/":
            raise OSError("Cannot remove root directory")
        entry = self._get(path)
        if isinstance(entry, DirectoryEntry):
            children = self._children(path)
            if children and not recursive:
                raise OSError(f"Directory not empty: {path}")
            prefix = path + "/"
            for p in [p for p in self._data if p.startswith(prefix)]:
                del self._data[p]
        del self._data[path]
