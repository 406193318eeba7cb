"""Argument parser utilities for hoconkit CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .options_parser import add_options_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_options_subparser",
]
