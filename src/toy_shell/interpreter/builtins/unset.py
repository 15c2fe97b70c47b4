"""Unset statement.

Usage: unset name
"""

from typing import TYPE_CHECKING

from ...parser import TokenType

if TYPE_CHECKING:
    from ..interpreter import ScriptInterpreter


async def handle_unset(interp: "ScriptInterpreter") -> str:
    """Execute the unset statement."""
    interp.expect(TokenType.KEYWORD, "unset")
    interp.environment.unset(interp.expect(TokenType.WORD).value)
    return ""
