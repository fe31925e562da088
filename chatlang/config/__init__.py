"""
Configuration package for the chat language backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    LanguagePolicySettings,
    ChatSettings,
    settings,
    get_settings,
    reload_settings,
)
from .loader import ConfigLoader, load_config_for_environment

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "LanguagePolicySettings",
    "ChatSettings",
    "settings",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_config_for_environment",
]
