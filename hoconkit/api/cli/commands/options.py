"""Options command module - resolves and displays render options."""

import argparse
import sys
from typing import Any, Dict

from loguru import logger

from hoconkit.core.config import HoconKitConfig
from hoconkit.core.models import PRESET_NAMES, ConfigRenderOptions
from hoconkit.core.types import RenderFlag
from ..utils.output import OutputFormatter


def options_command(args: argparse.Namespace) -> None:
    """Execute the options command with appropriate subcommand.

    Args:
        args: Parsed command-line arguments
    """
    subcommand_handlers = {
        "show": options_show_command,
        "presets": options_presets_command,
    }

    handler = subcommand_handlers.get(args.options_command)
    if handler:
        handler(args)
    else:
        logger.error(f"Unknown options command: {args.options_command}")
        sys.exit(1)


def options_show_command(args: argparse.Namespace) -> None:
    """Handle options show command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))

    overrides = render_overrides_from_args(args)
    config = HoconKitConfig.load_hierarchical(
        config_file=args.config,
        **({"render": overrides} if overrides else {})
    )
    if config.debug:
        formatter.verbose = True

    options = config.to_render_options()
    formatter.verbose_info(f"Preset: {config.render.preset}")
    formatter.verbose_info(f"Comment prefix: {options.comment_prefix!r}")
    if options.json and not options.is_strict_json:
        formatter.verbose_info("JSON syntax requested but comments are enabled; output is not strict JSON")

    if args.format == "json":
        formatter.json_output(options.to_dict())
    else:
        print(options)


def options_presets_command(args: argparse.Namespace) -> None:
    """Handle options presets command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    presets = {name: ConfigRenderOptions.preset(name) for name in PRESET_NAMES}

    if args.format == "json":
        formatter.json_output({name: options.to_dict() for name, options in presets.items()})
        return

    for name, options in presets.items():
        print(f"{name}: {options}")


def render_overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the render settings given explicitly on the command line.

    Args:
        args: Parsed command-line arguments

    Returns:
        Render settings keyed the way RenderSettings accepts them
    """
    overrides: Dict[str, Any] = {}

    if getattr(args, 'preset', None):
        overrides["preset"] = args.preset

    for flag in RenderFlag:
        value = getattr(args, flag.attribute, None)
        if value is not None:
            overrides[flag.attribute] = value

    if getattr(args, 'comment_prefix', None) is not None:
        overrides["comment_prefix"] = args.comment_prefix

    logger.debug(f"Render overrides from command line: {overrides}")
    return overrides
