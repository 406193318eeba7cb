"""hoconkit Core Models Package - Domain model definitions.

The models are immutable dataclasses (frozen=True): updates go through
``set_*`` methods that return a new instance instead of mutating in place.
"""

from .render_options import DEFAULT_COMMENT_PREFIX, PRESET_NAMES, ConfigRenderOptions

__all__ = [
    "ConfigRenderOptions",
    "DEFAULT_COMMENT_PREFIX",
    "PRESET_NAMES",
]
