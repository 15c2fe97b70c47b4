"""Filesystem implementations for toy-shell."""

from .in_memory_fs import (
    DirectoryEntry,
    FileEntry,
    FsEntry,
    FsStat,
    InMemoryFs,
    normalize_path,
)

__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "FsEntry",
    "FsStat",
    "InMemoryFs",
    "normalize_path",
]
