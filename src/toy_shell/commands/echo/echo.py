"""Echo command implementation.

Usage: echo [-e] [-n] [STRING]...

Display a line of text.

Options:
  -e    enable interpretation of backslash escapes
  -n    do not output the trailing newline
"""

from ...types import CommandContext, CommandResult, ok

ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
    "\\": "\\",
}


def interpret_escapes(text: str) -> str:
    """Replace backslash escape sequences in text."""
    result = []
    i = 0
    while i < len(text):
        if text[i] == "\\" and i + 1 < len(text) and text[i + 1] in ESCAPES:
            result.append(ESCAPES[text[i + 1]])
            i += 2
        else:
            result.append(text[i])
            i += 1
    return "".join(result)


class EchoCommand:
    """The echo command."""

    name = "echo"
    description = "Display a line of text"
    usage = "echo [-e] [-n] [text...]"

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the echo command."""
        escapes = False
        newline = True

        while args and args[0] in ("-e", "-n", "-en", "-ne"):
            flag = args[0]
            if "e" in flag:
                escapes = True
            if "n" in flag:
                newline = False
            args = args[1:]

        text = " ".join(args)
        if escapes:
            text = interpret_escapes(text)
        return ok(text + "\n" if newline else text)
