"""hoconkit configuration package - settings that select render options."""

from .unified_config import (
    HoconKitConfig,
    RenderSettings,
    get_config,
    reset_config,
    set_config,
)

__all__ = [
    "HoconKitConfig",
    "RenderSettings",
    "get_config",
    "set_config",
    "reset_config",
]
