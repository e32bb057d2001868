"""Reading the optional ``.covhtml.yml`` settings file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

import yaml

from covhtml._meta import logger
from covhtml.errors import InvalidSettingsError, SettingsReadError

if TYPE_CHECKING:
    from typing import TextIO

SETTINGS_FILE = ".covhtml.yml"

_SCALAR_KEYS = ("input", "output", "theme")
_LIST_KEYS = ("include", "exclude")


class SettingsSource(Protocol):
    """Existence check and read access for the settings file."""

    def exists(self, path: str) -> bool: ...

    def read(self, path: str) -> TextIO: ...


class FileSettingsSource:
    """Settings source backed by the local filesystem."""

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read(self, path: str) -> TextIO:
        return Path(path).open(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class SettingsValues:
    """Raw values from the settings file. ``None`` means the key was not set."""

    input: str | None = None
    output: str | None = None
    theme: str | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None


def _coerce_scalar(key: str, value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        msg = f"settings key {key!r} must be a string"
        raise InvalidSettingsError(msg)
    return str(value)


def _coerce_list(key: str, value: Any) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        msg = f"settings key {key!r} must be a list of strings"
        raise InvalidSettingsError(msg)
    out: list[str] = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, (dict, list)):
            msg = f"settings key {key!r} must be a list of strings"
            raise InvalidSettingsError(msg)
        out.append(str(item))
    return out


def parse_settings(data: Any) -> SettingsValues:
    """Convert a parsed YAML document into :class:`SettingsValues`."""
    if data is None:
        return SettingsValues()
    if not isinstance(data, dict):
        msg = "settings file must contain a mapping"
        raise InvalidSettingsError(msg)

    for key in data:
        if key not in _SCALAR_KEYS and key not in _LIST_KEYS:
            logger.debug("ignoring unknown settings key %r", key)

    scalars = {key: _coerce_scalar(key, data.get(key)) for key in _SCALAR_KEYS}
    lists = {key: _coerce_list(key, data.get(key)) for key in _LIST_KEYS}
    return SettingsValues(**scalars, **lists)


def load_settings(source: SettingsSource, path: str = SETTINGS_FILE) -> SettingsValues | None:
    """Load settings from *path*, or return ``None`` when the file does not exist."""
    if not source.exists(path):
        logger.debug("no settings file at %s", path)
        return None

    try:
        with source.read(path) as stream:
            data = yaml.safe_load(stream)
    except yaml.YAMLError as exc:
        msg = f"invalid settings file {path}: {exc}"
        raise InvalidSettingsError(msg) from exc
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"failed to read settings file {path}: {exc}"
        raise SettingsReadError(msg) from exc

    logger.debug("loaded settings from %s", path)
    return parse_settings(data)


__all__ = [
    "SETTINGS_FILE",
    "FileSettingsSource",
    "SettingsSource",
    "SettingsValues",
    "load_settings",
    "parse_settings",
]
