"""Configuration package for runtime settings and startup validation."""

from .settings import LOG_LEVEL_CHOICES, ResponderSettings, SettingsLoadError, config_load_settings

__all__ = ["LOG_LEVEL_CHOICES", "ResponderSettings", "SettingsLoadError", "config_load_settings"]
