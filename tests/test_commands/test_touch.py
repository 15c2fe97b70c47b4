"""Tests for touch."""

import pytest
from toy_shell import Shell


class TestTouch:
    """Test touch."""

    @pytest.mark.asyncio
    async def test_creates_empty_file(self):
        shell = Shell()
        result = await shell.exec("touch a.txt b.txt")
        assert result.succeeded
        assert await shell.fs.read_file("/a.txt") == ""
        assert await shell.fs.read_file("/b.txt") == ""

    @pytest.mark.asyncio
    async def test_keeps_existing_content(self):
        shell = Shell(files={"/a.txt": "data"})
        await shell.exec("touch a.txt")
        assert await shell.fs.read_file("/a.txt") == "data"

    @pytest.mark.asyncio
    async def test_no_create(self):
        shell = Shell()
        result = await shell.exec("touch -c ghost")
        assert result.succeeded
        assert not await shell.fs.exists("/ghost")

    @pytest.mark.asyncio
    async def test_missing_parent(self):
        result = await Shell().exec("touch nodir/file")
        assert result.error_message == "touch: cannot touch 'nodir/file': No such file or directory"

    @pytest.mark.asyncio
    async def test_missing_operand(self):
        result = await Shell().exec("touch")
        assert not result.succeeded
        assert result.error_message.startswith("touch: missing file operand")

    @pytest.mark.asyncio
    async def test_invalid_option(self):
        result = await Shell().exec("touch -z f")
        assert result.error_message.startswith("touch: invalid option -- 'z'")
