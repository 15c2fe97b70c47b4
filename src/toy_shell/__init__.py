"""toy-shell - a toy shell with a virtual file tree and a mini scripting language."""

from .executor import CommandExecutor
from .fs import InMemoryFs
from .interpreter import (
    Environment,
    ExecutionLimitError,
    FunctionCallNotSupportedError,
    FunctionDefinition,
    InvalidOperatorError,
    ScriptError,
    ScriptInterpreter,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .parser import Token, TokenType, tokenize
from .shell import Shell
from .types import CommandContext, CommandResult, ExecutionLimits, ShellState

__all__ = [
    "CommandContext",
    "CommandExecutor",
    "CommandResult",
    "Environment",
    "ExecutionLimitError",
    "ExecutionLimits",
    "FunctionCallNotSupportedError",
    "FunctionDefinition",
    "InMemoryFs",
    "InvalidOperatorError",
    "ScriptError",
    "ScriptInterpreter",
    "Shell",
    "ShellState",
    "Token",
    "TokenType",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "tokenize",
]
