"""Lexer for toy-shell scripts.

Converts raw script text into a flat list of typed tokens. The lexer is
total: any text it does not recognize degrades to a WORD token.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token kinds produced by the lexer."""

    WORD = auto()
    VARIABLE = auto()
    OPERATOR = auto()
    KEYWORD = auto()
    BRACE = auto()
    SEMICOLON = auto()
    NEWLINE = auto()
    COMMENT = auto()
    EOF = auto()


KEYWORDS = frozenset({
    "if", "then", "else", "fi",
    "for", "while", "until", "do", "done",
    "case", "esac",
    "function", "return",
    "break", "continue",
    "export", "unset", "read",
    "let", "declare",
})

OPERATORS = frozenset({
    "&&", "||", "|", ">", ">>", "<", "2>", "2>>",
    "=", "+=", "-=", "*=", "/=", "%=",
    "==", "!=", "<=", ">=",
    "+", "-", "*", "/", "%",
})

OPERATOR_START_CHARS = frozenset("&|><=+-*/%")
BRACE_CHARS = frozenset("{}()")


@dataclass(frozen=True)
class Token:
    """A lexical token with its 1-based source position."""

    type: TokenType
    value: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.type.name}({self.value!r})"


def _is_blank(char: str) -> bool:
    return char.isspace() and char != "\n"


def _is_name_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


class Lexer:
    """Single-pass lexer tracking line and column."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the whole input, always ending with one EOF token."""
        while self.pos < len(self.text):
            char = self.text[self.pos]

            if _is_blank(char):
                self._advance()
            elif char == "#":
                self._read_comment()
            elif char == "$":
                self._read_variable()
            elif char in OPERATOR_START_CHARS:
                self._read_operator()
            elif char in BRACE_CHARS:
                self._emit_single(TokenType.BRACE)
            elif char == ";":
                self._emit_single(TokenType.SEMICOLON)
            elif char == "\n":
                self._emit_single(TokenType.NEWLINE)
                self.line += 1
                self.column = 1
            else:
                self._read_word()

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column))
        return self.tokens

    def _advance(self) -> str:
        char = self.text[self.pos]
        self.pos += 1
        self.column += 1
        return char

    def _emit_single(self, type_: TokenType) -> None:
        self.tokens.append(Token(type_, self.text[self.pos], self.line, self.column))
        self._advance()

    def _read_comment(self) -> None:
        line, column = self.line, self.column
        start = self.pos
        # The newline is left for the main loop
        while self.pos < len(self.text) and self.text[self.pos] != "\n":
            self._advance()
        self.tokens.append(Token(TokenType.COMMENT, self.text[start:self.pos], line, column))

    def _read_variable(self) -> None:
        line, column = self.line, self.column
        self._advance()  # $
        if self.pos < len(self.text) and self.text[self.pos] == "{":
            self._advance()
            start = self.pos
            while self.pos < len(self.text) and self.text[self.pos] != "}":
                self._advance()
            name = self.text[start:self.pos]
            if self.pos < len(self.text):
                self._advance()  # }
        else:
            start = self.pos
            while self.pos < len(self.text) and _is_name_char(self.text[self.pos]):
                self._advance()
            name = self.text[start:self.pos]
        self.tokens.append(Token(TokenType.VARIABLE, name, line, column))

    def _read_operator(self) -> None:
        end = self.pos
        while end < len(self.text) and self.text[end] in OPERATOR_START_CHARS:
            end += 1

        # Longest match: back off one character at a time
        candidate = self.text[self.pos:end]
        while candidate and candidate not in OPERATORS:
            candidate = candidate[:-1]

        if not candidate:
            self._read_word(force=True)
            return

        self.tokens.append(Token(TokenType.OPERATOR, candidate, self.line, self.column))
        for _ in candidate:
            self._advance()

    def _read_word(self, force: bool = False) -> None:
        line, column = self.line, self.column
        start = self.pos
        if force:
            # Starts on an operator character that matched no operator
            self._advance()
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if (
                _is_blank(char)
                or char in OPERATOR_START_CHARS
                or char in BRACE_CHARS
                or char in ";\n#"
            ):
                break
            self._advance()

        word = self.text[start:self.pos]
        type_ = TokenType.KEYWORD if word in KEYWORDS else TokenType.WORD
        self.tokens.append(Token(type_, word, line, column))


def tokenize(text: str) -> list[Token]:
    """Tokenize script text."""
    return Lexer(text).tokenize()
