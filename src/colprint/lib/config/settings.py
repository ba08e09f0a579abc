"""Project-level colprint config loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

from colprint.lib.errors import ConfigError
from colprint.lib.template import RenderMode

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".colprint.toml"


@dataclass(frozen=True, slots=True)
class ColprintConfig:
    """Resolved defaults for CLI rendering."""

    separator: str = " | "
    mode: RenderMode = RenderMode.DISPLAY
    pretty_width: int = 80


_SECTION_KEY_MAP: dict[str, dict[str, str]] = {
    "defaults": {
        "separator": "separator",
        "mode": "mode",
    },
    "render": {
        "pretty_width": "pretty_width",
    },
}

ENV_OVERRIDE_MAP: dict[str, str] = {
    "COLPRINT_SEPARATOR": "separator",
    "COLPRINT_MODE": "mode",
    "COLPRINT_PRETTY_WIDTH": "pretty_width",
}


def _coerce_mode(raw_value: str, *, source: str) -> RenderMode:
    normalized = raw_value.strip().lower().replace("-", "_")
    try:
        return RenderMode(normalized)
    except ValueError as error:
        raise ConfigError(
            f"Invalid value for '{source}': expected one of "
            f"{sorted(mode.value for mode in RenderMode)}, got {raw_value!r}."
        ) from error


def _check_pretty_width(value: int, *, source: str) -> int:
    if value < 1:
        raise ConfigError(f"Invalid value for '{source}': expected int >= 1, got {value!r}.")
    return value


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    if field_name == "pretty_width":
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ConfigError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return _check_pretty_width(raw_value, source=source)

    if not isinstance(raw_value, str):
        raise ConfigError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    if field_name == "mode":
        return _coerce_mode(raw_value, source=source)
    # Separators are literal text; surrounding whitespace is significant.
    return raw_value


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    source = f"environment override {env_name}"
    if field_name == "pretty_width":
        try:
            parsed = int(raw_value.strip())
        except ValueError as error:
            raise ConfigError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error
        return _check_pretty_width(parsed, source=source)
    if field_name == "mode":
        return _coerce_mode(raw_value, source=source)
    return raw_value


def _default_values() -> dict[str, object]:
    defaults = ColprintConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(ColprintConfig)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        section_map = _SECTION_KEY_MAP.get(key)
        if section_map is None:
            logger.warning("Ignoring unknown colprint config key '%s'.", key)
            continue
        if not isinstance(raw_value, dict):
            raise ConfigError(f"Invalid value for '{key}' in '{path}': expected table.")
        for section_key, section_value in cast("dict[str, object]", raw_value).items():
            field_name = section_map.get(section_key)
            if field_name is None:
                logger.warning(
                    "Ignoring unknown colprint config key '%s.%s'.",
                    key,
                    section_key,
                )
                continue
            values[field_name] = _coerce_file_value(
                field_name=field_name,
                raw_value=section_value,
                source=f"{key}.{section_key}",
            )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def read_config_payload(path: Path) -> dict[str, object]:
    """Read the raw TOML table at *path*; a missing file reads as empty."""

    if not path.is_file():
        return {}
    try:
        payload = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as error:
        raise ConfigError(f"Invalid TOML in '{path}': {error}") from error
    return cast("dict[str, object]", payload)


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILENAME


def resolve_project_root(explicit: Path | None = None) -> Path:
    """Resolve the directory whose `.colprint.toml` applies.

    Precedence:
    1. Explicit function argument.
    2. `COLPRINT_ROOT` environment variable.
    3. Nearest of cwd and its ancestors holding `.colprint.toml` or `.git`.
    4. Current working directory.
    """

    if explicit is not None:
        return explicit.expanduser().resolve()

    env_root = os.getenv("COLPRINT_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path.cwd().resolve()
    for candidate in (cwd, *cwd.parents):
        if (candidate / CONFIG_FILENAME).is_file() or (candidate / ".git").exists():
            return candidate
    return cwd


def load_config(project_root: Path) -> ColprintConfig:
    """Load `.colprint.toml` under *project_root* and apply env overrides."""

    values = _default_values()
    path = config_path(project_root)
    _apply_toml_payload(values=values, payload=read_config_payload(path), path=path)
    _apply_env_overrides(values)
    return ColprintConfig(
        separator=cast("str", values["separator"]),
        mode=cast("RenderMode", values["mode"]),
        pretty_width=cast("int", values["pretty_width"]),
    )
