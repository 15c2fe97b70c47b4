"""Tests for pwd and cd."""

import pytest
from toy_shell import Shell


class TestPwd:
    """Test pwd."""

    @pytest.mark.asyncio
    async def test_pwd_default(self):
        shell = Shell()
        result = await shell.exec("pwd")
        assert result.output == "/\n"

    @pytest.mark.asyncio
    async def test_pwd_initial_cwd(self):
        shell = Shell(files={"/home/user/.keep": ""}, cwd="/home/user")
        result = await shell.exec("pwd")
        assert result.output == "/home/user\n"

    @pytest.mark.asyncio
    async def test_pwd_rejects_arguments(self):
        result = await Shell().exec("pwd extra")
        assert not result.succeeded


class TestCd:
    """Test cd."""

    @pytest.mark.asyncio
    async def test_cd_relative_and_parent(self):
        shell = Shell()
        await shell.exec("mkdir -p a/b")
        await shell.exec("cd a")
        await shell.exec("cd b")
        assert shell.cwd == "/a/b"
        await shell.exec("cd ..")
        assert shell.cwd == "/a"

    @pytest.mark.asyncio
    async def test_cd_home(self):
        shell = Shell(files={"/x/f": ""}, cwd="/x")
        await shell.exec("cd ~")
        assert shell.cwd == "/"
        await shell.exec("cd /x")
        await shell.exec("cd")
        assert shell.cwd == "/"

    @pytest.mark.asyncio
    async def test_cd_previous(self):
        shell = Shell(files={"/x/f": "", "/y/f": ""})
        await shell.exec("cd /x")
        await shell.exec("cd /y")
        await shell.exec("cd -")
        assert shell.cwd == "/x"

    @pytest.mark.asyncio
    async def test_cd_missing(self):
        shell = Shell()
        result = await shell.exec("cd nowhere")
        assert not result.succeeded
        assert result.error_message == "cd: nowhere: No such file or directory"
        assert shell.cwd == "/"

    @pytest.mark.asyncio
    async def test_cd_into_file(self):
        shell = Shell(files={"/f.txt": ""})
        result = await shell.exec("cd f.txt")
        assert result.error_message == "cd: f.txt: Not a directory"

    @pytest.mark.asyncio
    async def test_cd_too_many_arguments(self):
        result = await Shell().exec("cd a b")
        assert result.error_message == "cd: too many arguments"
