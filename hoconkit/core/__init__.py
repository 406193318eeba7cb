"""hoconkit Core Package - Render options model, types, exceptions and settings.

Modules:
    models: The immutable ConfigRenderOptions value
    types: RenderFlag enumeration and type aliases
    exceptions: Core exception classes for error handling
    config: Settings loader that resolves render options
"""

from .exceptions import (
    ConfigurationError,
    HoconKitError,
    ValidationError,
)
from .models import DEFAULT_COMMENT_PREFIX, PRESET_NAMES, ConfigRenderOptions
from .types import CommentPrefix, RenderFlag

__all__ = [
    # Domain Models
    "ConfigRenderOptions",
    "DEFAULT_COMMENT_PREFIX",
    "PRESET_NAMES",

    # Types
    "RenderFlag",
    "CommentPrefix",

    # Exceptions
    "HoconKitError",
    "ValidationError",
    "ConfigurationError",
]
