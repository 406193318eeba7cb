"""Utility modules for hoconkit CLI commands."""

from .output import OutputFormatter

__all__ = [
    "OutputFormatter",
]
