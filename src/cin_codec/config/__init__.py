"""Configuration module for cin-codec."""

from cin_codec.config.settings import (
    CodecSettings,
    get_settings,
    load_settings_from_yaml,
    load_settings_from_yaml_safe,
    reset_settings,
)

__all__ = [
    "CodecSettings",
    "get_settings",
    "load_settings_from_yaml",
    "load_settings_from_yaml_safe",
    "reset_settings",
]
