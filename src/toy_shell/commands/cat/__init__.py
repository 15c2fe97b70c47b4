"""Cat command."""

from .cat import CatCommand

__all__ = ["CatCommand"]
