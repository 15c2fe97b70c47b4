"""Parser module for toy-shell."""

from .lexer import (
    BRACE_CHARS,
    KEYWORDS,
    OPERATOR_START_CHARS,
    OPERATORS,
    Lexer,
    Token,
    TokenType,
    tokenize,
)

__all__ = [
    "BRACE_CHARS",
    "KEYWORDS",
    "OPERATOR_START_CHARS",
    "OPERATORS",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
]
