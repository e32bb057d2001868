"""Centralised exception hierarchy for covhtml."""

from __future__ import annotations


class CovhtmlError(Exception):
    """Base class for all custom covhtml exceptions."""


class ConfigError(CovhtmlError):
    """Base class for errors raised while resolving the run configuration."""


class InvalidThemeError(ConfigError):
    """Theme resolved to a value other than ``dark`` or ``light``."""


class InvalidFilterPathError(ConfigError):
    """An include/exclude entry is an absolute path."""


class SettingsFileError(ConfigError):
    """Base class for errors related to the settings file."""


class SettingsReadError(SettingsFileError):
    """Settings file exists but could not be read."""


class InvalidSettingsError(SettingsFileError):
    """Settings file was read but does not contain valid settings."""


class ProfileError(CovhtmlError):
    """Base class for errors related to coverage profile handling."""


class ProfileNotFoundError(ProfileError):
    """Coverage profile could not be located on disk."""


class InvalidProfileError(ProfileError):
    """Coverage profile was found but is not in the expected format."""


__all__ = [
    "ConfigError",
    "CovhtmlError",
    "InvalidFilterPathError",
    "InvalidProfileError",
    "InvalidSettingsError",
    "InvalidThemeError",
    "ProfileError",
    "ProfileNotFoundError",
    "SettingsFileError",
    "SettingsReadError",
]
