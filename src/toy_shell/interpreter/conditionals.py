"""Condition evaluation.

A condition is exactly three tokens: ``operand OPERATOR operand``. Operands
that name a set variable resolve to its value, anything else is taken
literally. All comparisons are lexicographic string comparisons.
"""

import operator
from typing import TYPE_CHECKING, Callable

from ..parser import TokenType
from .errors import InvalidOperatorError

if TYPE_CHECKING:
    from .interpreter import ScriptInterpreter


COMPARISONS: dict[str, Callable[[str, str], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    ">": operator.gt,
    "<=": operator.le,
    ">=": operator.ge,
}


def _read_operand(interp: "ScriptInterpreter") -> str:
    env = interp.environment
    token = interp.peek()
    if token.type == TokenType.VARIABLE:
        interp.advance()
        return env.get(token.value)
    token = interp.expect(TokenType.WORD)
    if env.has(token.value):
        return env.get(token.value)
    return token.value


def evaluate_condition(interp: "ScriptInterpreter") -> bool:
    """Consume a three-token condition and evaluate it."""
    left = _read_operand(interp)
    op = interp.expect(TokenType.OPERATOR)
    right = _read_operand(interp)

    compare = COMPARISONS.get(op.value)
    if compare is None:
        raise InvalidOperatorError(op)
    return compare(left, right)
