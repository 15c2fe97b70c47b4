"""Tests for the in-memory file tree."""

import pytest

from toy_shell.fs import InMemoryFs, normalize_path


class TestPaths:
    def test_normalize(self):
        assert normalize_path("/a/./b//c/../d") == "/a/b/d"
        assert normalize_path("/../..") == "/"
        assert normalize_path("") == "/"

    def test_resolve_relative(self):
        fs = InMemoryFs()
        assert fs.resolve_path("/home", "docs/../notes.txt") == "/home/notes.txt"
        assert fs.resolve_path("/", "a") == "/a"
        assert fs.resolve_path("/home", "/etc") == "/etc"


class TestFiles:
    @pytest.mark.asyncio
    async def test_initial_files_create_parents(self):
        fs = InMemoryFs(initial_files={"/a/b/c.txt": "hi"})
        assert (await fs.stat("/a")).is_directory
        assert (await fs.stat("/a/b")).is_directory
        assert await fs.read_file("/a/b/c.txt") == "hi"

    @pytest.mark.asyncio
    async def test_write_overwrites(self):
        fs = InMemoryFs()
        await fs.write_file("/f", "one")
        await fs.write_file("/f", "two")
        assert await fs.read_file("/f") == "two"

    @pytest.mark.asyncio
    async def test_append(self):
        fs = InMemoryFs()
        await fs.append_file("/f", "a")
        await fs.append_file("/f", "b")
        assert await fs.read_file("/f") == "ab"

    @pytest.mark.asyncio
    async def test_write_needs_parent(self):
        fs = InMemoryFs()
        with pytest.raises(FileNotFoundError):
            await fs.write_file("/missing/f", "x")

    @pytest.mark.asyncio
    async def test_read_missing(self):
        with pytest.raises(FileNotFoundError):
            await InMemoryFs().read_file("/nope")

    @pytest.mark.asyncio
    async def test_read_directory(self):
        with pytest.raises(IsADirectoryError):
            await InMemoryFs().read_file("/")

    @pytest.mark.asyncio
    async def test_stat_size(self):
        fs = InMemoryFs(initial_files={"/f": "12345"})
        stat = await fs.stat("/f")
        assert stat.is_file
        assert stat.size == 5

    @pytest.mark.asyncio
    async def test_touch_creates_then_keeps_content(self):
        fs = InMemoryFs()
        await fs.touch("/t")
        assert await fs.read_file("/t") == ""
        await fs.write_file("/t", "data")
        await fs.touch("/t")
        assert await fs.read_file("/t") == "data"


class TestDirectories:
    @pytest.mark.asyncio
    async def test_mkdir_and_readdir(self):
        fs = InMemoryFs(initial_files={"/z.txt": ""})
        await fs.mkdir("/b")
        await fs.mkdir("/a")
        assert await fs.readdir("/") == ["a", "b", "z.txt"]

    @pytest.mark.asyncio
    async def test_readdir_only_direct_children(self):
        fs = InMemoryFs(initial_files={"/d/x/y.txt": ""})
        assert await fs.readdir("/d") == ["x"]

    @pytest.mark.asyncio
    async def test_mkdir_existing(self):
        fs = InMemoryFs()
        await fs.mkdir("/a")
        with pytest.raises(FileExistsError):
            await fs.mkdir("/a")
        await fs.mkdir("/a", recursive=True)

    @pytest.mark.asyncio
    async def test_mkdir_missing_parent(self):
        fs = InMemoryFs()
        with pytest.raises(FileNotFoundError):
            await fs.mkdir("/a/b")

    @pytest.mark.asyncio
    async def test_mkdir_recursive(self):
        fs = InMemoryFs()
        await fs.mkdir("/a/b/c", recursive=True)
        assert await fs.readdir("/a/b") == ["c"]

    @pytest.mark.asyncio
    async def test_readdir_file(self):
        fs = InMemoryFs(initial_files={"/f": ""})
        with pytest.raises(NotADirectoryError):
            await fs.readdir("/f")

    @pytest.mark.asyncio
    async def test_rm_non_empty_needs_recursive(self):
        fs = InMemoryFs(initial_files={"/d/f": "", "/dd": ""})
        with pytest.raises(OSError):
            await fs.rm("/d")
        await fs.rm("/d", recursive=True)
        assert not await fs.exists("/d")
        assert not await fs.exists("/d/f")
        assert await fs.exists("/dd")

    @pytest.mark.asyncio
    async def test_rm_root(self):
        with pytest.raises(OSError):
            await InMemoryFs().rm("/", recursive=True)
