"""hoconkit Core Types Package - Common type definitions and aliases."""

from .common import (
    CommentPrefix,
    RenderFlag,
)

__all__ = [
    # Enums
    "RenderFlag",

    # String types
    "CommentPrefix",
]
