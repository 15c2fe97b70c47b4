"""Function definition statement.

Usage: function name [(param ...)] body ... end

The body is captured as raw tokens up to the word ``end`` (or the end of
the script) and stored in the environment. Stored functions cannot be
called.
"""

import logging
from typing import TYPE_CHECKING

from ...parser import Token, TokenType

if TYPE_CHECKING:
    from ..interpreter import ScriptInterpreter

logger = logging.getLogger(__name__)


async def handle_function(interp: "ScriptInterpreter") -> str:
    """Register a function definition."""
    interp.expect(TokenType.KEYWORD, "function")
    name = interp.expect(TokenType.WORD).value

    parameters: list[str] = []
    start = interp.peek()
    if start.type == TokenType.BRACE and start.value == "(":
        interp.advance()
        while not interp.at_end():
            token = interp.advance()
            if token.type == TokenType.BRACE and token.value == ")":
                break
            if token.type == TokenType.WORD:
                parameters.append(token.value)

    body: list[Token] = []
    while not interp.at_end():
        token = interp.advance()
        if token.type == TokenType.WORD and token.value == "end":
            break
        body.append(token)

    interp.environment.define_function(name, parameters, body)
    logger.debug("defined function %s(%s) with %d body tokens", name, ", ".join(parameters), len(body))
    return ""
