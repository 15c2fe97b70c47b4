"""Interpreter - token-stream execution engine.

Executes a script by walking its token list directly with one shared
cursor; no syntax tree is built. Statement handlers (control_flow.py,
builtins/) advance the cursor themselves and always leave it on the first
token after what they consumed.

Nested blocks are delimited by a *stop set*: the keywords that make
``execute_statements`` return control to the enclosing construct.
"""

import logging
from typing import Awaitable, Callable, Iterable, Optional

from ..parser import Token, TokenType, tokenize
from ..types import CommandResult, ExecutionLimits, ICommandExecutor
from .builtins import BUILTINS
from .control_flow import execute_for, execute_if, execute_while
from .errors import (
    ExecutionLimitError,
    FunctionCallNotSupportedError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .types import Environment

logger = logging.getLogger(__name__)

StatementHandler = Callable[["ScriptInterpreter"], Awaitable[str]]

STATEMENT_HANDLERS: dict[str, StatementHandler] = {
    "if": execute_if,
    "for": execute_for,
    "while": execute_while,
    **BUILTINS,
}

# Opening keyword -> keyword that closes its block, for skipping
BLOCK_CLOSERS = {
    "if": "fi",
    "for": "done",
    "while": "done",
    "until": "done",
}

_SEPARATORS = (TokenType.NEWLINE, TokenType.SEMICOLON)

# Keywords after which the next token begins a new statement
_STATEMENT_LEADERS = frozenset({"then", "else", "do", "fi", "done"})


class ScriptInterpreter:
    """Token-stream interpreter for toy-shell scripts."""

    def __init__(
        self,
        executor: ICommandExecutor,
        *,
        environment: Optional[Environment] = None,
        limits: Optional[ExecutionLimits] = None,
    ):
        """Initialize the interpreter.

        Args:
            executor: Runs assembled command lines.
            environment: Variable/function bindings (a fresh one by default).
            limits: Execution limits.
        """
        self.executor = executor
        self.environment = environment if environment is not None else Environment()
        self.limits = limits or ExecutionLimits()
        self.tokens: list[Token] = []
        self.pos = 0
        # (command line, result) for every delegated command that failed
        self.failures: list[tuple[str, CommandResult]] = []

    async def interpret(self, script: str) -> str:
        """Tokenize and run a script, returning its accumulated output."""
        return await self.run(tokenize(script))

    async def run(self, tokens: Iterable[Token]) -> str:
        """Run a token sequence, returning its accumulated output."""
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            last = self.tokens[-1] if self.tokens else None
            self.tokens.append(
                Token(TokenType.EOF, "", last.line if last else 1, last.column if last else 1)
            )
        self.pos = 0
        self.failures = []
        return await self.execute_statements()

    # Cursor primitives

    def peek(self) -> Token:
        """Token under the cursor (EOF once past the end)."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]

    def advance(self) -> Token:
        """Consume and return the token under the cursor."""
        token = self.peek()
        self.pos += 1
        return token

    def at_end(self) -> bool:
        """Check whether the cursor is on (or past) EOF."""
        return self.pos >= len(self.tokens) or self.tokens[self.pos].type == TokenType.EOF

    def check_keyword(self, *values: str) -> bool:
        """Check whether the cursor is on one of the given keywords."""
        token = self.peek()
        return token.type == TokenType.KEYWORD and token.value in values

    def expect(self, type_: TokenType, value: Optional[str] = None) -> Token:
        """Consume the token under the cursor, which must match."""
        if self.at_end():
            raise UnexpectedEndOfInputError(type_, value)
        token = self.tokens[self.pos]
        if token.type != type_ or (value is not None and token.value != value):
            raise UnexpectedTokenError(token, type_, value)
        self.pos += 1
        return token

    def skip_block(self, stop: frozenset[str]) -> None:
        """Move past statements without running them, up to a stop keyword.

        Nested if/fi and loop/done pairs are skipped whole. An opening
        keyword only starts a nested block where the dispatch loop would run
        it as a statement; as a command argument (``echo for you``) it is
        plain text.
        """
        closers: list[str] = []
        while not self.at_end():
            token = self.tokens[self.pos]
            if token.type == TokenType.KEYWORD:
                if not closers and token.value in stop:
                    return
                if token.value in BLOCK_CLOSERS and self._at_statement_start(self.pos):
                    closers.append(BLOCK_CLOSERS[token.value])
                elif closers and token.value == closers[-1]:
                    closers.pop()
            self.pos += 1

    def _at_statement_start(self, index: int) -> bool:
        if index == 0:
            return True
        previous = self.tokens[index - 1]
        if previous.type in _SEPARATORS or previous.type == TokenType.COMMENT:
            return True
        return previous.type == TokenType.KEYWORD and previous.value in _STATEMENT_LEADERS

    def check_loop_limit(self, kind: str, iteration: int) -> None:
        """Raise if a loop has run more iterations than allowed."""
        limit = self.limits.max_loop_iterations
        if limit is not None and iteration > limit:
            raise ExecutionLimitError(
                f"{kind} loop: too many iterations ({limit})",
                "iterations",
            )

    # Execution

    async def execute_statements(self, stop: frozenset[str] = frozenset()) -> str:
        """Statement dispatch loop.

        Runs statements until EOF or until a keyword in ``stop`` is under the
        cursor (which is left unconsumed).
        """
        output = ""
        while not self.at_end():
            token = self.tokens[self.pos]

            if token.type in _SEPARATORS or token.type == TokenType.COMMENT:
                self.pos += 1
                continue

            if token.type == TokenType.KEYWORD:
                if token.value in stop:
                    break
                handler = STATEMENT_HANDLERS.get(token.value)
                if handler is not None:
                    output += await handler(self)
                    continue

            output += await self.execute_command(stop)
        return output

    async def execute_command(self, stop: frozenset[str] = frozenset()) -> str:
        """Assemble one plain command line and hand it to the executor.

        Variables are substituted token by token. Redirection operators are
        kept in place for the executor to resolve.
        """
        words: list[str] = []
        first: Optional[Token] = None

        while not self.at_end():
            token = self.tokens[self.pos]
            if token.type in _SEPARATORS:
                self.pos += 1
                break
            if token.type == TokenType.KEYWORD and token.value in stop:
                break
            self.pos += 1

            if token.type == TokenType.COMMENT:
                continue
            if first is None:
                first = token
            if token.type == TokenType.VARIABLE:
                words.append(self.environment.get(token.value))
            else:
                words.append(token.value)

        if first is None:
            return ""

        if first.type == TokenType.WORD and self.environment.lookup_function(first.value):
            raise FunctionCallNotSupportedError(first.value)

        command_line = " ".join(words)
        logger.debug("executing %r", command_line)
        result = await self.executor.execute(command_line)
        if not result.succeeded:
            logger.warning("command failed: %s: %s", command_line, result.error_message)
            self.failures.append((command_line, result))
            return ""
        return result.output
