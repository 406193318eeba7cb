"""hoconkit Core Exceptions Package - Core exception classes for error handling.

The hierarchy is rooted at HoconKitError so callers can catch every
library error with a single except clause.
"""

from .core import (
    ConfigurationError,
    HoconKitError,
    ValidationError,
)

__all__ = [
    # Base exception
    "HoconKitError",

    # Domain-specific exceptions
    "ValidationError",
    "ConfigurationError",
]
