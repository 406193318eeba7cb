"""hoconkit - Render options for HOCON and JSON configuration output."""

__version__ = "1.0.0"
__description__ = "Render options for HOCON and JSON configuration output"

__all__ = [
    "ConfigRenderOptions",
    "RenderFlag",
    "HoconKitError",
    "ValidationError",
    "ConfigurationError",
    "HoconKitConfig",
]


def __getattr__(name: str):
    """Lazy import so the CLI can start without loading the settings stack."""
    if name in ("ConfigRenderOptions", "RenderFlag", "HoconKitError",
                "ValidationError", "ConfigurationError"):
        from . import core
        return getattr(core, name)
    elif name == "HoconKitConfig":
        from .core.config import HoconKitConfig
        return HoconKitConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
