"""Main argument parser for hoconkit CLI."""

import argparse

from hoconkit import __version__


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="hoconkit",
        description="Inspect the render options used for HOCON and JSON output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hoconkit options show
  hoconkit options show --preset concise --format json
  hoconkit options show --no-comments --comment-prefix //
  hoconkit options show --config ./render.json
  hoconkit options presets
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"hoconkit {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def add_format_argument(parser: argparse.ArgumentParser) -> None:
    """Add output format argument to a parser.

    Args:
        parser: Parser to add argument to
    """
    parser.add_argument(
        "--format",
        choices=["summary", "json"],
        default="summary",
        help="Output format (default: summary)",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
    "add_format_argument",
]
