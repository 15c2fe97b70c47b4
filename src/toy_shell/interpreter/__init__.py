"""Interpreter module for toy-shell."""

from .errors import (
    ExecutionLimitError,
    FunctionCallNotSupportedError,
    InvalidOperatorError,
    ScriptError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .interpreter import STATEMENT_HANDLERS, ScriptInterpreter
from .types import Environment, FunctionDefinition

__all__ = [
    "Environment",
    "ExecutionLimitError",
    "FunctionCallNotSupportedError",
    "FunctionDefinition",
    "InvalidOperatorError",
    "STATEMENT_HANDLERS",
    "ScriptError",
    "ScriptInterpreter",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
]
