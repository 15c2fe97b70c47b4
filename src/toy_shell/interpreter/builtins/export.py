"""Export statement.

Usage: export name

There is no child process to export to, so this only makes sure the
variable is set, keeping its current value (empty if it was unset).
"""

from typing import TYPE_CHECKING

from ...parser import TokenType

if TYPE_CHECKING:
    from ..interpreter import ScriptInterpreter


async def handle_export(interp: "ScriptInterpreter") -> str:
    """Execute the export statement."""
    interp.expect(TokenType.KEYWORD, "export")
    name = interp.expect(TokenType.WORD).value
    env = interp.environment
    env.set(name, env.get(name))
    return ""
