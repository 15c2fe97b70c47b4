"""Clear command."""

from .clear import ClearCommand

__all__ = ["ClearCommand"]
