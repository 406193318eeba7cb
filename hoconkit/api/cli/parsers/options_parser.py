"""Options command argument parser for hoconkit CLI."""

import argparse
from pathlib import Path

from hoconkit.core.models import PRESET_NAMES
from hoconkit.core.types import RenderFlag

from .main_parser import add_common_arguments, add_format_argument


_FLAG_HELP = {
    RenderFlag.ORIGIN_COMMENTS: "autogenerated comments naming where each setting came from",
    RenderFlag.COMMENTS: "human-written comments",
    RenderFlag.FORMATTED: "indentation and whitespace",
    RenderFlag.JSON: "JSON-only syntax (no HOCON extensions)",
    RenderFlag.SHOW_ENV_VARIABLE_VALUES: "values set from environment variables",
}


def add_options_subparser(subparsers) -> argparse.ArgumentParser:
    """Add options command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured options subparser
    """
    options_parser = subparsers.add_parser(
        "options",
        help="Inspect render options",
        description="Resolve and display render options"
    )

    options_subparsers = options_parser.add_subparsers(
        dest="options_command",
        help="Options commands",
        required=True
    )

    # Options show command
    show_parser = options_subparsers.add_parser(
        "show",
        help="Show the render options resolved from settings and flags"
    )
    add_common_arguments(show_parser)
    add_format_argument(show_parser)
    show_parser.add_argument(
        "--config",
        type=Path,
        help="Settings file used instead of ./.hoconkit.json"
    )
    show_parser.add_argument(
        "--preset",
        choices=PRESET_NAMES,
        help="Preset to start from (default: from settings, else defaults)"
    )
    for flag in RenderFlag:
        show_parser.add_argument(
            flag.cli_option,
            dest=flag.attribute,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"Render {_FLAG_HELP[flag]}"
        )
    show_parser.add_argument(
        "--comment-prefix",
        help="Token prepended to comment lines"
    )

    # Options presets command
    presets_parser = options_subparsers.add_parser(
        "presets",
        help="Show the built-in presets"
    )
    add_common_arguments(presets_parser)
    add_format_argument(presets_parser)

    return options_parser
