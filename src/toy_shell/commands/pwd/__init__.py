"""Pwd command."""

from .pwd import PwdCommand

__all__ = ["PwdCommand"]
