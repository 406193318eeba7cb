"""hoconkit Core Types - Common type definitions and aliases.

This module contains the enumeration of render toggles and the type aliases
shared by the render options model, the settings loader and the CLI.
"""

from enum import Enum
from typing import NewType

from ..exceptions import ValidationError


CommentPrefix = NewType("CommentPrefix", str)   # e.g. "#" or "//"


class RenderFlag(Enum):
    """Boolean render toggles, declared in the order they are summarized.

    The value of each member is its display name as it appears in
    ``str(ConfigRenderOptions)``; ``attribute`` gives the dataclass field.
    """

    ORIGIN_COMMENTS = "originComments"
    COMMENTS = "comments"
    FORMATTED = "formatted"
    JSON = "json"
    SHOW_ENV_VARIABLE_VALUES = "showEnvVariableValues"

    @classmethod
    def from_string(cls, value: str) -> "RenderFlag":
        """Convert a display name or attribute name to a RenderFlag.

        Raises:
            ValidationError: If the name matches no flag
        """
        try:
            return cls(value)
        except ValueError:
            pass

        for flag in cls:
            if flag.attribute == value:
                return flag

        raise ValidationError("flag", value, f"Unknown render flag: {value!r}")

    @property
    def attribute(self) -> str:
        """Return the ConfigRenderOptions attribute backing this flag."""
        return self.name.lower()

    @property
    def cli_option(self) -> str:
        """Return the long command-line option for this flag."""
        return "--" + self.attribute.replace("_", "-")
