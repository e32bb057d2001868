"""Merge CLI arguments, the settings file and defaults into an EffectiveConfig.

Precedence per field: a non-empty CLI value > a non-empty settings value >
the built-in default. A CLI value that is ``None`` (not supplied) or blank
(supplied empty) does not override anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Generic, TypeVar

from covhtml._meta import logger
from covhtml.errors import InvalidFilterPathError, InvalidThemeError
from covhtml.model.config import DEFAULT_INPUT, DEFAULT_OUTPUT, DEFAULT_THEME, EffectiveConfig
from covhtml.model.path_filter import normalize_path
from covhtml.model.types import Theme

from .settings import SETTINGS_FILE, FileSettingsSource, SettingsValues, load_settings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .settings import SettingsSource

T = TypeVar("T")


class Layer(StrEnum):
    """Configuration layer a resolved value was taken from."""

    CLI = "cli"
    SETTINGS = "settings"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class Resolved(Generic[T]):
    value: T
    layer: Layer

    @property
    def overridden(self) -> bool:
        return self.layer is not Layer.DEFAULT


def _present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple)):
        return any(str(item).strip() for item in value)
    return True


def resolve_field(cli: str | None, settings: T | None, default: T) -> Resolved[str | T]:
    """Pick the winning value for one field across the three layers."""
    if cli is not None and cli.strip():
        return Resolved(cli.strip(), Layer.CLI)
    if settings is not None and _present(settings):
        return Resolved(settings, Layer.SETTINGS)
    return Resolved(default, Layer.DEFAULT)


def split_entries(value: str) -> list[str]:
    """Split a comma-separated CLI value into entries."""
    return value.split(",")


def normalize_entries(entries: Iterable[str], *, field: str) -> tuple[str, ...]:
    """Trim, normalize, validate and de-dupe filter entries, preserving order."""
    out: list[str] = []
    seen: set[str] = set()
    for raw in entries:
        s = raw.strip()
        if not s:
            continue
        if s.removeprefix("./").startswith("/"):
            msg = f"{field} must be a relative path: {raw.strip()!r}"
            raise InvalidFilterPathError(msg)
        s = normalize_path(s)
        if not s or s in seen:
            continue
        seen.add(s)
        out.append(s)
    return tuple(out)


def resolve_theme(value: str | Theme) -> Theme:
    if not value:
        return DEFAULT_THEME
    try:
        return Theme(value)
    except ValueError as exc:
        choices = ", ".join(t.value for t in Theme)
        msg = f"invalid theme {value!r}; expected one of: {choices}"
        raise InvalidThemeError(msg) from exc


def _resolve_list(cli: str | None, settings: list[str] | None, *, field: str) -> tuple[str, ...]:
    resolved = resolve_field(cli, settings, [])
    logger.debug("%s taken from %s", field, resolved.layer.value)
    entries = split_entries(resolved.value) if isinstance(resolved.value, str) else resolved.value
    return normalize_entries(entries, field=field)


def build_config(
    settings: SettingsValues | None,
    *,
    input: str | None = None,  # noqa: A002
    output: str | None = None,
    theme: str | None = None,
    include: str | None = None,
    exclude: str | None = None,
) -> EffectiveConfig:
    """Resolve every field from already loaded *settings* and CLI values."""
    s = settings or SettingsValues()

    input_r = resolve_field(input, s.input, DEFAULT_INPUT)
    output_r = resolve_field(output, s.output, DEFAULT_OUTPUT)
    theme_r = resolve_field(theme, s.theme, DEFAULT_THEME.value)
    for name, r in (("input", input_r), ("output", output_r), ("theme", theme_r)):
        logger.debug("%s=%r taken from %s", name, r.value, r.layer.value)

    return EffectiveConfig(
        input=str(input_r.value).strip(),
        output=str(output_r.value).strip(),
        theme=resolve_theme(str(theme_r.value).strip()),
        include=_resolve_list(include, s.include, field="include"),
        exclude=_resolve_list(exclude, s.exclude, field="exclude"),
    )


def resolve_config(
    *,
    input: str | None = None,  # noqa: A002
    output: str | None = None,
    theme: str | None = None,
    include: str | None = None,
    exclude: str | None = None,
    source: SettingsSource | None = None,
    settings_path: str = SETTINGS_FILE,
) -> EffectiveConfig:
    """Return the effective configuration for this run.

    Raises a :class:`~covhtml.errors.ConfigError` subclass when the settings
    file cannot be read or a resolved value is invalid; no partial
    configuration is ever returned.
    """
    settings = load_settings(source or FileSettingsSource(), settings_path)
    return build_config(
        settings,
        input=input,
        output=output,
        theme=theme,
        include=include,
        exclude=exclude,
    )


__all__ = [
    "Layer",
    "Resolved",
    "build_config",
    "normalize_entries",
    "resolve_config",
    "resolve_field",
    "resolve_theme",
    "split_entries",
]
