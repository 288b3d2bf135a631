"""Configuration package exports."""

from .loader import CONFIG_ENV_VAR, load_settings, locate_config, resolve_settings
from .models import DEFAULT_CHANNEL_CAPACITY, DEFAULT_TIMEOUT_SECONDS, ScrapeSettings

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CHANNEL_CAPACITY",
    "DEFAULT_TIMEOUT_SECONDS",
    "ScrapeSettings",
    "load_settings",
    "locate_config",
    "resolve_settings",
]
