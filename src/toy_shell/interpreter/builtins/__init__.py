"""Statement builtins that act on the environment."""

from .export import handle_export
from .function import handle_function
from .unset import handle_unset

BUILTINS = {
    "export": handle_export,
    "function": handle_function,
    "unset": handle_unset,
}

__all__ = ["BUILTINS", "handle_export", "handle_function", "handle_unset"]
