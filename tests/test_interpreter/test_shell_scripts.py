"""End-to-end script tests against the built-in commands."""

import pytest
from toy_shell import (
    ExecutionLimits,
    FunctionCallNotSupportedError,
    Shell,
    UnexpectedTokenError,
)


class TestScripts:
    """Test scripts run through Shell.interpret."""

    @pytest.mark.asyncio
    async def test_loop_output(self):
        shell = Shell()
        output = await shell.interpret("for i in 1 2 3 do echo $i done")
        assert output == "1\n2\n3\n"

    @pytest.mark.asyncio
    async def test_files_created_in_loop(self):
        shell = Shell()
        script = """
mkdir notes
cd notes
for name in a.txt b.txt
do
    echo entry $name > $name
done
ls
cat b.txt
"""
        output = await shell.interpret(script)
        assert output == "a.txt\nb.txt\nentry b.txt\n"
        assert shell.cwd == "/notes"
        assert await shell.fs.read_file("/notes/a.txt") == "entry a.txt\n"

    @pytest.mark.asyncio
    async def test_append_in_loop(self):
        shell = Shell()
        await shell.interpret("for w in x y z do echo $w >> log done")
        assert await shell.fs.read_file("/log") == "x\ny\nz\n"

    @pytest.mark.asyncio
    async def test_if_else(self):
        shell = Shell(env={"mode": "fast"})
        output = await shell.interpret("if $mode == fast then echo quick else echo slow fi")
        assert output == "quick\n"

    @pytest.mark.asyncio
    async def test_failed_command_output_omitted(self):
        shell = Shell()
        output = await shell.interpret("echo before\ncat missing.txt\nnosuchcommand\necho after")
        assert output == "before\nafter\n"

    @pytest.mark.asyncio
    async def test_each_run_gets_fresh_environment(self):
        shell = Shell(env={"seed": "s"})
        await shell.interpret("for i in 1 do done\nunset seed")
        output = await shell.interpret("echo $seed $i.")
        assert output == "s .\n"

    @pytest.mark.asyncio
    async def test_comment_only_script(self):
        assert await Shell().interpret("# nothing here\n\n# still nothing") == ""

    @pytest.mark.asyncio
    async def test_structural_error_propagates(self):
        with pytest.raises(UnexpectedTokenError):
            await Shell().interpret("if a == b == c then echo x fi")

    @pytest.mark.asyncio
    async def test_function_call_rejected(self):
        with pytest.raises(FunctionCallNotSupportedError):
            await Shell().interpret("function hi echo hi end\nhi")

    @pytest.mark.asyncio
    async def test_limits_are_applied(self):
        shell = Shell(limits=ExecutionLimits(max_loop_iterations=1))
        with pytest.raises(Exception, match="too many iterations"):
            await shell.interpret("for i in a b do echo $i done")


class TestScriptCommand:
    """Test the script command."""

    @pytest.mark.asyncio
    async def test_script_from_file(self):
        shell = Shell(files={"/job.sh": "for i in a b do echo item $i done\n"})
        result = await shell.exec("script job.sh")
        assert result.succeeded
        assert result.output == "item a\nitem b\n"

    @pytest.mark.asyncio
    async def test_script_inline(self):
        result = await Shell().exec("script -c if x == x then echo inline fi")
        assert result.output == "inline\n"

    @pytest.mark.asyncio
    async def test_script_error_becomes_failure(self):
        result = await Shell().exec("script -c if a then echo x fi")
        assert not result.succeeded
        assert result.error_message.startswith("script: Unexpected token KEYWORD \"then\"")

    @pytest.mark.asyncio
    async def test_script_missing_file(self):
        result = await Shell().exec("script nope.sh")
        assert result.error_message == "script: nope.sh: No such file or directory"

    @pytest.mark.asyncio
    async def test_script_usage(self):
        result = await Shell().exec("script")
        assert not result.succeeded
        assert result.error_message.startswith("Usage: script")

    @pytest.mark.asyncio
    async def test_nested_script_shares_file_tree(self):
        shell = Shell(files={"/inner.sh": "echo nested > out"})
        output = await shell.interpret("script inner.sh\ncat out")
        assert output == "nested\n"

    @pytest.mark.asyncio
    async def test_script_applies_shell_limits(self):
        shell = Shell(limits=ExecutionLimits(max_loop_iterations=2))
        result = await shell.exec("script -c for i in a b c do echo $i done")
        assert not result.succeeded
        assert result.error_message == "script: for loop: too many iterations (2)"

    @pytest.mark.asyncio
    async def test_script_file_applies_shell_limits(self):
        shell = Shell(
            files={"/loop.sh": "for i in a b c do echo $i done"},
            limits=ExecutionLimits(max_loop_iterations=2),
        )
        result = await shell.exec("script loop.sh")
        assert not result.succeeded
        assert "too many iterations" in result.error_message

    @pytest.mark.asyncio
    async def test_script_within_limits(self):
        shell = Shell(limits=ExecutionLimits(max_loop_iterations=2))
        result = await shell.exec("script -c for i in a b do echo $i done")
        assert result.output == "a\nb\n"

    @pytest.mark.asyncio
    async def test_script_sees_shell_variables(self):
        shell = Shell(env={"greeting": "hi"})
        result = await shell.exec("script -c echo $greeting there")
        assert result.output == "hi there\n"

    @pytest.mark.asyncio
    async def test_script_gets_fresh_environment(self):
        shell = Shell(env={"greeting": "hi"})
        await shell.exec("script -c unset greeting")
        result = await shell.exec("script -c echo $greeting.")
        assert result.output == "hi .\n"


class TestSyncApi:
    """Test the synchronous wrappers."""

    def test_run(self):
        shell = Shell()
        result = shell.run("echo hello")
        assert result.output == "hello\n"

    def test_run_script(self):
        shell = Shell()
        assert shell.run_script("for i in a b do echo $i done") == "a\nb\n"
