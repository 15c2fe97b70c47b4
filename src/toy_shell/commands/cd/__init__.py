"""Cd command."""

from .cd import CdCommand

__all__ = ["CdCommand"]
