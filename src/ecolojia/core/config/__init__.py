"""Configuration module with YAML and environment variable support."""

from ecolojia.core.config.settings import Settings, get_settings


__all__ = [
    "Settings",
    "get_settings",
]
