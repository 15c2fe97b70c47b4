"""Control Flow Execution.

Handles control flow constructs:
- if/then/else/fi
- for loops
- while loops

Blocks are not parsed ahead of time. Each handler runs (or skips) the
statements after its opening keyword until one of its terminator keywords
is under the cursor, then consumes the terminator.
"""

import logging
from typing import TYPE_CHECKING

from ..parser import TokenType
from .conditionals import evaluate_condition

if TYPE_CHECKING:
    from .interpreter import ScriptInterpreter

logger = logging.getLogger(__name__)

THEN_STOP = frozenset({"else", "fi"})
ELSE_STOP = frozenset({"fi"})
LOOP_STOP = frozenset({"done"})


async def execute_if(interp: "ScriptInterpreter") -> str:
    """Execute an if statement."""
    interp.expect(TokenType.KEYWORD, "if")
    condition = evaluate_condition(interp)
    interp.expect(TokenType.KEYWORD, "then")

    output = ""
    if condition:
        output = await interp.execute_statements(THEN_STOP)
    else:
        interp.skip_block(THEN_STOP)

    if interp.check_keyword("else"):
        interp.advance()
        if condition:
            interp.skip_block(ELSE_STOP)
        else:
            output = await interp.execute_statements(ELSE_STOP)

    interp.expect(TokenType.KEYWORD, "fi")
    return output


async def execute_for(interp: "ScriptInterpreter") -> str:
    """Execute a for loop."""
    interp.expect(TokenType.KEYWORD, "for")
    variable = interp.expect(TokenType.WORD).value
    interp.expect(TokenType.WORD, "in")

    # Only WORD tokens become items; anything else before 'do' is dropped
    items: list[str] = []
    while not interp.at_end() and not interp.check_keyword("do"):
        token = interp.advance()
        if token.type == TokenType.WORD:
            items.append(token.value)
    interp.expect(TokenType.KEYWORD, "do")

    body_start = interp.pos
    output = ""
    if not items:
        interp.skip_block(LOOP_STOP)

    for iteration, item in enumerate(items, 1):
        interp.check_loop_limit("for", iteration)
        logger.debug("for %s=%r (iteration %d)", variable, item, iteration)
        interp.environment.set(variable, item)
        interp.pos = body_start
        output += await interp.execute_statements(LOOP_STOP)

    interp.expect(TokenType.KEYWORD, "done")
    return output


async def execute_while(interp: "ScriptInterpreter") -> str:
    """Execute a while loop.

    The condition is re-read from its original position before every
    iteration, so changes the body makes to the environment are seen.
    """
    interp.expect(TokenType.KEYWORD, "while")
    condition_start = interp.pos
    output = ""
    iteration = 0

    while True:
        interp.pos = condition_start
        condition = evaluate_condition(interp)
        interp.expect(TokenType.KEYWORD, "do")
        if not condition:
            interp.skip_block(LOOP_STOP)
            break

        iteration += 1
        interp.check_loop_limit("while", iteration)
        logger.debug("while iteration %d", iteration)
        output += await interp.execute_statements(LOOP_STOP)
        interp.expect(TokenType.KEYWORD, "done")

    interp.expect(TokenType.KEYWORD, "done")
    return output
