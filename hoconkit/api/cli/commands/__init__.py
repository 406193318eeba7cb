"""hoconkit CLI commands package - modular command implementations."""

from .options import options_command

__all__ = [
    "options_command",
]
