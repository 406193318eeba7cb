"""
Unified configuration system for hoconkit.

This module provides a type-safe settings model that decides which
ConfigRenderOptions a process should use, with hierarchical loading from
JSON settings files, environment variables and runtime overrides.
"""

import json
from pathlib import Path
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from ..exceptions import ConfigurationError
from ..models import ConfigRenderOptions
from ..types import RenderFlag


USER_CONFIG_DIR = '.hoconkit'
USER_CONFIG_FILE = 'config.json'
PROJECT_CONFIG_FILE = '.hoconkit.json'


class RenderSettings(BaseModel):
    """Render options configuration.

    Starts from a named preset; every toggle left as None keeps the preset's
    value.
    """

    model_config = ConfigDict(populate_by_name=True)

    preset: Literal['defaults', 'concise'] = Field(
        default='defaults',
        description="Preset the overrides are applied on top of"
    )

    origin_comments: bool | None = Field(
        default=None,
        description="Render autogenerated origin comments"
    )

    comments: bool | None = Field(
        default=None,
        description="Render human-written comments"
    )

    formatted: bool | None = Field(
        default=None,
        description="Render indentation and whitespace"
    )

    # Aliased so the field does not shadow BaseModel.json
    json_syntax: bool | None = Field(
        default=None,
        alias='json',
        description="Restrict output to JSON syntax"
    )

    show_env_variable_values: bool | None = Field(
        default=None,
        description="Render values that came from environment variables"
    )

    comment_prefix: str | None = Field(
        default=None,
        min_length=1,
        description="Token prepended to comment lines"
    )

    def flag_overrides(self) -> dict[RenderFlag, bool]:
        """Return the boolean toggles this configuration sets explicitly."""
        values = {
            RenderFlag.ORIGIN_COMMENTS: self.origin_comments,
            RenderFlag.COMMENTS: self.comments,
            RenderFlag.FORMATTED: self.formatted,
            RenderFlag.JSON: self.json_syntax,
            RenderFlag.SHOW_ENV_VARIABLE_VALUES: self.show_env_variable_values,
        }
        return {flag: value for flag, value in values.items() if value is not None}

    def to_render_options(self) -> ConfigRenderOptions:
        """Build render options from the preset and the explicit overrides."""
        options = ConfigRenderOptions.preset(self.preset)

        for flag, value in self.flag_overrides().items():
            options = options.set_flag(flag, value)

        if self.comment_prefix is not None:
            options = options.set_comment_prefix(self.comment_prefix)

        logger.debug(f"Resolved render options from '{self.preset}' preset: {options}")
        return options


class HoconKitConfig(BaseSettings):
    """
    Unified configuration for hoconkit.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Project config file (.hoconkit.json) or an explicit config file
    3. User config file (~/.hoconkit/config.json)
    4. Environment variables (HOCONKIT_*)
    5. Default values (lowest priority)

    Environment Variable Examples:
        HOCONKIT_RENDER__PRESET=concise
        HOCONKIT_RENDER__COMMENTS=false
        HOCONKIT_RENDER__JSON=true
        HOCONKIT_RENDER__COMMENT_PREFIX=//
        HOCONKIT_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='HOCONKIT_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    render: RenderSettings = Field(
        default_factory=RenderSettings,
        description="Render options configuration"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          config_file: Path | None = None,
                          **override_values: Any) -> 'HoconKitConfig':
        """
        Load configuration from hierarchical sources.

        Args:
            project_dir: Project directory to search for .hoconkit.json
            config_file: Explicit config file used instead of the project file
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If a config file is malformed, an explicit
                config file is missing or unreadable, an environment value
                cannot be parsed, or the merged values are invalid
        """
        config_data: dict[str, Any] = {}

        # 1. User config file (~/.hoconkit/config.json)
        user_config_path = Path.home() / USER_CONFIG_DIR / USER_CONFIG_FILE
        _merge(config_data, _load_json_file(user_config_path))

        # 2. Explicit config file, or the project config file
        if config_file is not None:
            _merge(config_data, _load_json_file(Path(config_file), required=True))
        else:
            if project_dir is None:
                project_dir = Path.cwd()
            _merge(config_data, _load_json_file(Path(project_dir) / PROJECT_CONFIG_FILE))

        # 3. Runtime overrides
        _merge(config_data, override_values)

        # 4. Environment variables fill in whatever is left
        try:
            return cls(**config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(reason=f"Invalid settings: {e}", cause=e)
        except SettingsError as e:
            raise ConfigurationError(reason=f"Invalid environment settings: {e}", cause=e)

    def to_render_options(self) -> ConfigRenderOptions:
        """Return the render options described by this configuration."""
        return self.render.to_render_options()

    def to_dict(self) -> dict[str, Any]:
        """
        Convert configuration to dictionary format.

        Returns:
            Configuration as dictionary
        """
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


def _load_json_file(path: Path, required: bool = False) -> dict[str, Any]:
    """Load a JSON settings file, returning {} when an optional file is absent."""
    if not path.exists():
        if required:
            raise ConfigurationError(str(path), None, "Config file does not exist")
        return {}

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        if required:
            raise ConfigurationError(str(path), None, f"Failed to read config file: {e}", cause=e)
        logger.warning(f"Failed to load config file {path}: {e}")
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            str(path), data, "Top level of a config file must be a JSON object"
        )

    logger.debug(f"Loaded configuration from: {path}")
    return data


def _merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into target, combining nested dictionaries key by key."""
    for key, value in source.items():
        if isinstance(value, dict):
            existing = target.get(key)
            target[key] = _merge(existing if isinstance(existing, dict) else {}, value)
        else:
            target[key] = value
    return target


# Global configuration instance
_config_instance: HoconKitConfig | None = None


def get_config() -> HoconKitConfig:
    """
    Get the global configuration instance.

    Returns:
        Global HoconKitConfig instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = HoconKitConfig.load_hierarchical()
    return _config_instance


def set_config(config: HoconKitConfig) -> None:
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set as global
    """
    global _config_instance
    _config_instance = config


def reset_config() -> None:
    """Reset the global configuration instance."""
    global _config_instance
    _config_instance = None
