"""Run configuration: settings file loading and layered resolution."""

from .resolver import Layer, Resolved, build_config, normalize_entries, resolve_config, resolve_field
from .settings import SETTINGS_FILE, FileSettingsSource, SettingsSource, SettingsValues, load_settings

__all__ = [
    "SETTINGS_FILE",
    "FileSettingsSource",
    "Layer",
    "Resolved",
    "SettingsSource",
    "SettingsValues",
    "build_config",
    "load_settings",
    "normalize_entries",
    "resolve_config",
    "resolve_field",
]
