"""Help command implementation.

Usage: help [COMMAND]

List the available commands grouped by category, or show the description
and usage of one command.
"""

from ...types import CommandContext, CommandResult, failure, ok

CATEGORIES = {
    "File Operations": ("ls", "cat", "touch", "rm", "mkdir"),
    "Navigation": ("cd", "pwd"),
    "Scripting": ("script", "echo"),
    "System": ("clear",),
    "Help": ("help",),
}


def command_category(name: str) -> str:
    """Category a command is listed under."""
    for category, names in CATEGORIES.items():
        if name in names:
            return category
    return "Other"


class HelpCommand:
    """The help command."""

    name = "help"
    description = "Show help information for commands"
    usage = "help [command]"

    async def execute(self, args: list[str], ctx: CommandContext) -> CommandResult:
        """Execute the help command."""
        if args:
            command = ctx.commands.get(args[0])
            if command is None:
                return failure(f"Command not found: {args[0]}")
            return ok(
                f"Command: {command.name}\n"
                f"Description: {command.description}\n"
                f"Usage: {command.usage}\n"
            )

        grouped: dict[str, list[str]] = {}
        for name in sorted(ctx.commands):
            grouped.setdefault(command_category(name), []).append(name)

        lines = ["Available commands:", ""]
        for category in [*CATEGORIES, "Other"]:
            if category not in grouped:
                continue
            lines.append(f"{category}:")
            for name in grouped[category]:
                lines.append(f"  {name:<12} {ctx.commands[name].description}")
            lines.append("")
        lines.append('Type "help <command>" for more information about a specific command.')
        return ok("\n".join(lines) + "\n")
