"""Touch command."""

from .touch import TouchCommand

__all__ = ["TouchCommand"]
