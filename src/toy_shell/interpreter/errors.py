"""Interpreter errors.

Structural errors abort the whole script run. Failures reported by the
command executor are not exceptions; see ``ScriptInterpreter.failures``.
"""

from typing import Optional

from ..parser import Token, TokenType


class ScriptError(Exception):
    """Base class for errors that abort a script run."""


def _describe(type_: TokenType, value: Optional[str]) -> str:
    if value is None:
        return type_.name
    return f'{type_.name} "{value}"'


class UnexpectedTokenError(ScriptError):
    """The token under the cursor is not the one the grammar requires."""

    def __init__(
        self,
        found: Token,
        expected_type: TokenType,
        expected_value: Optional[str] = None,
    ):
        self.found = found
        self.expected_type = expected_type
        self.expected_value = expected_value
        super().__init__(
            f"Unexpected token {_describe(found.type, found.value)} "
            f"at line {found.line}, column {found.column}, "
            f"expected {_describe(expected_type, expected_value)}"
        )


class UnexpectedEndOfInputError(ScriptError):
    """The script ended while the grammar still required a token."""

    def __init__(self, expected_type: TokenType, expected_value: Optional[str] = None):
        self.expected_type = expected_type
        self.expected_value = expected_value
        super().__init__(
            f"Unexpected end of input, expected {_describe(expected_type, expected_value)}"
        )


class InvalidOperatorError(ScriptError):
    """A condition used an operator that is not a comparison."""

    def __init__(self, operator: Token):
        self.operator = operator
        super().__init__(
            f"Invalid comparison operator: {operator.value} "
            f"at line {operator.line}, column {operator.column}"
        )


class FunctionCallNotSupportedError(ScriptError):
    """A script tried to call a function it defined."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name}: function calls not supported")


class ExecutionLimitError(ScriptError):
    """A configured execution limit was exceeded."""

    def __init__(self, message: str, limit_type: str):
        self.limit_type = limit_type
        super().__init__(message)
