"""Script command."""

from .script import ScriptCommand

__all__ = ["ScriptCommand"]
