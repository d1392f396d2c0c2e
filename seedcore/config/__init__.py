"""Configuration loading for seedcore.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from seedcore.config import get_settings

    settings = get_settings()
    name = settings.application.name
"""

from functools import lru_cache

from seedcore.config.loader import load_config
from seedcore.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
