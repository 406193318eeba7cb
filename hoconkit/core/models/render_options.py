"""hoconkit Render Options Model - Toggles that control how a config is rendered.

This module contains the ConfigRenderOptions value which a renderer consults
while walking a configuration tree and emitting HOCON or JSON text. The value
is immutable: every toggle hands back either a new instance or, when the
requested value is already in effect, the very same instance.

Example:
    options = ConfigRenderOptions.defaults().set_comments(False)
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping

from ..exceptions import ValidationError
from ..types import CommentPrefix, RenderFlag


DEFAULT_COMMENT_PREFIX = CommentPrefix("#")

PRESET_NAMES = ("defaults", "concise")


@dataclass(frozen=True)
class ConfigRenderOptions:
    """Immutable set of options used when rendering a configuration value.

    Attributes:
        origin_comments: Emit autogenerated comments describing where each
            setting came from (which file, which line)
        comments: Emit human-written comments
        formatted: Emit indentation and whitespace
        json: Avoid HOCON extensions such as omitted commas or unquoted keys.
            Comments are governed separately, so json=True with comments
            enabled still produces text that is not strict JSON
        show_env_variable_values: Render values that were set from
            environment variables
        comment_prefix: Token written at the start of each comment line
    """

    origin_comments: bool
    comments: bool
    formatted: bool
    json: bool
    show_env_variable_values: bool
    comment_prefix: CommentPrefix = DEFAULT_COMMENT_PREFIX

    def __post_init__(self):
        """Validate render options after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.comment_prefix, str):
            raise ValidationError(
                "comment_prefix",
                self.comment_prefix,
                f"Comment prefix must be a string, got {type(self.comment_prefix).__name__}"
            )

    @classmethod
    def defaults(cls) -> "ConfigRenderOptions":
        """Return verbose options: commented and formatted.

        Because comments are enabled the rendering is not valid JSON. See
        concise() for the stripped-down variant.
        """
        return cls(
            origin_comments=True,
            comments=True,
            formatted=True,
            json=True,
            show_env_variable_values=True,
            comment_prefix=DEFAULT_COMMENT_PREFIX
        )

    @classmethod
    def concise(cls) -> "ConfigRenderOptions":
        """Return options without whitespace or comments.

        Rendering a resolved config with these options yields valid JSON.
        """
        return cls(
            origin_comments=False,
            comments=False,
            formatted=False,
            json=True,
            show_env_variable_values=True,
            comment_prefix=DEFAULT_COMMENT_PREFIX
        )

    @classmethod
    def preset(cls, name: str) -> "ConfigRenderOptions":
        """Return the preset registered under ``name``.

        Args:
            name: Either "defaults" or "concise"

        Raises:
            ValidationError: If the preset name is unknown
        """
        if name == "defaults":
            return cls.defaults()
        if name == "concise":
            return cls.concise()
        raise ValidationError(
            "preset", name, f"Unknown preset, expected one of: {', '.join(PRESET_NAMES)}"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConfigRenderOptions":
        """Create render options from a dictionary.

        The optional "preset" key picks the starting point (defaults when
        absent); every other key is applied through the matching toggle.
        Flag keys may use either the attribute name or the display name.

        Args:
            data: Dictionary of option values

        Returns:
            Render options built from the dictionary

        Raises:
            ValidationError: If a key is unknown or a value has the wrong type
        """
        values = dict(data)
        options = cls.preset(values.pop("preset", "defaults"))

        for key, value in values.items():
            if key in ("comment_prefix", "commentPrefix"):
                options = options.set_comment_prefix(value)
                continue

            flag = RenderFlag.from_string(key)
            if not isinstance(value, bool):
                raise ValidationError(
                    flag.attribute, value, f"Expected a boolean, got {type(value).__name__}"
                )
            options = options.set_flag(flag, value)

        return options

    def to_dict(self) -> Dict[str, Any]:
        """Convert render options to a dictionary keyed by attribute name."""
        result: Dict[str, Any] = {
            flag.attribute: getattr(self, flag.attribute) for flag in RenderFlag
        }
        result["comment_prefix"] = self.comment_prefix
        return result

    def set_flag(self, flag: RenderFlag, value: bool) -> "ConfigRenderOptions":
        """Return options with a single boolean toggle set to ``value``.

        Returns self when the toggle already has that value.
        """
        value = bool(value)
        if getattr(self, flag.attribute) == value:
            return self
        return replace(self, **{flag.attribute: value})

    def set_origin_comments(self, value: bool) -> "ConfigRenderOptions":
        """Return options with origin comments toggled.

        Origin comments are generated by the renderer from each value's
        origin, e.g. the file a setting was loaded from. Human-written
        comments are toggled with set_comments().
        """
        return self.set_flag(RenderFlag.ORIGIN_COMMENTS, value)

    def set_comments(self, value: bool) -> "ConfigRenderOptions":
        """Return options with human-written comments toggled.

        Does not affect origin comments, see set_origin_comments().
        """
        return self.set_flag(RenderFlag.COMMENTS, value)

    def set_formatted(self, value: bool) -> "ConfigRenderOptions":
        """Return options with indentation and whitespace toggled."""
        return self.set_flag(RenderFlag.FORMATTED, value)

    def set_json(self, value: bool) -> "ConfigRenderOptions":
        """Return options with JSON-only syntax toggled.

        Comments remain governed by set_comments() and set_origin_comments(),
        so leaving them enabled yields invalid JSON even with json=True.
        """
        return self.set_flag(RenderFlag.JSON, value)

    def set_show_env_variable_values(self, value: bool) -> "ConfigRenderOptions":
        """Return options with rendering of environment-sourced values toggled."""
        return self.set_flag(RenderFlag.SHOW_ENV_VARIABLE_VALUES, value)

    def set_comment_prefix(self, value: str) -> "ConfigRenderOptions":
        """Return options with a different comment prefix.

        Args:
            value: Token to start comment lines with, e.g. "#" or "//"

        Raises:
            ValidationError: If value is None or not a string
        """
        if value is None:
            raise ValidationError("comment_prefix", value, "Comment prefix cannot be None")
        if not isinstance(value, str):
            raise ValidationError(
                "comment_prefix", value, f"Comment prefix must be a string, got {type(value).__name__}"
            )
        if value == self.comment_prefix:
            return self
        return replace(self, comment_prefix=CommentPrefix(value))

    def enabled_flags(self) -> List[RenderFlag]:
        """Return the boolean toggles that are on, in summary order."""
        return [flag for flag in RenderFlag if getattr(self, flag.attribute)]

    @property
    def is_strict_json(self) -> bool:
        """Return True if rendering with these options yields strict JSON."""
        return self.json and not self.comments and not self.origin_comments

    def __str__(self) -> str:
        """Return the summary of enabled toggles, e.g. ConfigRenderOptions(json)."""
        return f"ConfigRenderOptions({','.join(flag.value for flag in self.enabled_flags())})"
