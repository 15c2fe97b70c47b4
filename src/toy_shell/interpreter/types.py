"""Interpreter types for toy-shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..parser import Token


@dataclass(frozen=True)
class FunctionDefinition:
    """A function captured as a raw slice of tokens."""

    name: str
    parameters: tuple[str, ...] = ()
    body: tuple[Token, ...] = ()


@dataclass
class Environment:
    """Variable and function bindings for one script run."""

    variables: dict[str, str] = field(default_factory=dict)
    functions: dict[str, FunctionDefinition] = field(default_factory=dict)

    def get(self, name: str) -> str:
        """Get a variable's value; unset names yield the empty string."""
        return self.variables.get(name, "")

    def has(self, name: str) -> bool:
        """Check whether a variable is set."""
        return name in self.variables

    def set(self, name: str, value: str) -> None:
        """Set a variable."""
        self.variables[name] = value

    def unset(self, name: str) -> None:
        """Remove a variable. Unsetting an absent name is a no-op."""
        self.variables.pop(name, None)

    def define_function(
        self, name: str, parameters: list[str], body: list[Token]
    ) -> FunctionDefinition:
        """Register (or replace) a function definition."""
        definition = FunctionDefinition(name, tuple(parameters), tuple(body))
        self.functions[name] = definition
        return definition

    def lookup_function(self, name: str) -> Optional[FunctionDefinition]:
        """Look up a function definition by name."""
        return self.functions.get(name)
