"""Script command implementation.

Usage: script FILE
       script -c TEXT...

Run a toy-shell script from a file, or the text given after -c, and print
its accumulated output. Each run gets a fresh environment seeded with the
shell's variables, and runs under the shell's execution limits.
"""

from ...interpreter import Environment, ScriptError, ScriptInterpreter
from ...types import CommandContext, CommandResult, failure, ok


class ScriptCommand:
    """The script command."""

    name = "script"
    description = "Execute a toy-shell script"
    usage = 'script <file> or script -c "script content"'

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the script command."""
        if not args:
            return failure(f"Usage: {self.usage}")
        if ctx.executor is None:
            return failure("script: internal error: executor not available")

        if args[0] == "-c":
            if len(args) < 2:
                return failure("script: -c: no script content provided")
            source = " ".join(args[1:])
        else:
            path = ctx.fs.resolve_path(ctx.state.cwd, args[0])
            try:
                source = await ctx.fs.read_file(path)
            except FileNotFoundError:
                return failure(f"script: {args[0]}: No such file or directory")
            except IsADirectoryError:
                return failure(f"script: {args[0]}: Is a directory")

        interpreter = ScriptInterpreter(
            ctx.executor,
            environment=Environment(variables=dict(ctx.env)),
            limits=ctx.limits,
        )
        try:
            return ok(await interpreter.interpret(source))
        except ScriptError as e:
            return failure(f"script: {e}")
