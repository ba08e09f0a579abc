"""Operations behind the CLI commands and their result types."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import structlog

from colprint.lib.config.settings import (
    ENV_OVERRIDE_MAP,
    ColprintConfig,
    config_path,
    load_config,
    read_config_payload,
    resolve_project_root,
)
from colprint.lib.entry import tag_values
from colprint.lib.render import ColumnBlock, layout_columns
from colprint.lib.template import ColumnDescriptor, RenderMode, parse_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colprint.lib.formatting import FormatContext

logger = structlog.get_logger(__name__)

_MODE_TOKENS: dict[RenderMode, str] = {
    RenderMode.DISPLAY: "{}",
    RenderMode.DEBUG: "{:?}",
    RenderMode.PRETTY_DEBUG: "{:#?}",
}


def _tabular(header: tuple[str, ...], rows: Sequence[tuple[str, ...]]) -> str:
    """Align *rows* under *header* with two-space gutters."""

    columns = ["\n".join(row[index] for row in (header, *rows)) for index in range(len(header))]
    block = layout_columns([ColumnDescriptor(separator="  ") for _ in header], columns)
    return "\n".join(row.rstrip() for row in block.rows())


def _project_root(raw: str | None) -> Path:
    return resolve_project_root(Path(raw) if raw else None)


# render


@dataclass(frozen=True, slots=True)
class RenderFilesInput:
    paths: tuple[str, ...]
    template: str | None = None
    json_values: bool = False
    pretty_width: int | None = None
    project_root: str | None = None


def default_template(count: int, config: ColprintConfig) -> str:
    """Build a template of *count* columns from config defaults.

    >>> default_template(2, ColprintConfig(mode=RenderMode.DEBUG))
    '{:?} | {:?}'
    """

    return config.separator.join([_MODE_TOKENS[config.mode]] * count)


def read_source(path: str) -> str:
    """Read one column source; ``-`` reads standard input."""

    if path == "-":
        return sys.stdin.read()
    return Path(path).expanduser().read_text(encoding="utf-8")


def _load_value(path: str, *, json_values: bool) -> object:
    text = read_source(path)
    if not json_values:
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(f"'{path}' is not valid JSON: {error}") from error


def render_files_sync(payload: RenderFilesInput) -> ColumnBlock:
    if not payload.paths:
        raise ValueError("At least one path is required.")

    config = load_config(_project_root(payload.project_root))
    template = payload.template
    if template is None:
        template = default_template(len(payload.paths), config)
    values = [_load_value(path, json_values=payload.json_values) for path in payload.paths]
    descriptors = parse_template(template)
    if len(descriptors) != len(values):
        logger.info(
            "Template and value counts differ; extra entries are dropped.",
            columns=len(descriptors),
            values=len(values),
        )

    block = layout_columns(
        descriptors,
        tag_values(template, values),
        pretty_width=(
            config.pretty_width if payload.pretty_width is None else payload.pretty_width
        ),
    )
    logger.debug(
        "Rendered column block.",
        template=template,
        widths=list(block.widths),
        rows=block.row_count,
    )
    return block


# parse


@dataclass(frozen=True, slots=True)
class ParseTemplateInput:
    template: str


@dataclass(frozen=True, slots=True)
class ParseTemplateOutput:
    template: str
    columns: tuple[ColumnDescriptor, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        if not self.columns:
            return "no columns"
        rows = [
            (
                str(index),
                str(column.mode),
                "auto" if column.width is None else str(column.width),
                "-" if column.separator is None else repr(column.separator),
            )
            for index, column in enumerate(self.columns)
        ]
        return _tabular(("#", "mode", "width", "separator"), rows)


def parse_template_sync(payload: ParseTemplateInput) -> ParseTemplateOutput:
    return ParseTemplateOutput(template=payload.template, columns=parse_template(payload.template))


# config


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    project_root: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigResolvedValue:
    key: str
    value: object
    source: Literal["builtin", "file", "env var"]
    env_var: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    path: str
    values: tuple[ConfigResolvedValue, ...]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        verbose = ctx is not None and ctx.verbosity > 0
        rows = []
        for item in self.values:
            source_note = item.source
            if item.env_var is not None and verbose:
                source_note = f"{source_note} ({item.env_var})"
            rows.append((item.key, _format_value_for_text(item.value), f"[source: {source_note}]"))
        table = _tabular(("key", "value", "source"), rows)
        return f"path: {self.path}\n{table}" if verbose else table


def _format_value_for_text(value: object) -> str:
    if isinstance(value, str):
        return repr(str(value))
    return str(value)


_FILE_KEYS: dict[str, tuple[str, str]] = {
    "separator": ("defaults", "separator"),
    "mode": ("defaults", "mode"),
    "pretty_width": ("render", "pretty_width"),
}


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    root = _project_root(payload.project_root)
    path = config_path(root)
    config = load_config(root)
    file_payload = read_config_payload(path)
    env_names = {field_name: env_name for env_name, field_name in ENV_OVERRIDE_MAP.items()}

    values: list[ConfigResolvedValue] = []
    for field_name, (section, key) in _FILE_KEYS.items():
        env_name = env_names[field_name]
        section_payload = file_payload.get(section)
        source: Literal["builtin", "file", "env var"] = "builtin"
        if os.getenv(env_name) is not None:
            source = "env var"
        elif isinstance(section_payload, dict) and key in section_payload:
            source = "file"
        values.append(
            ConfigResolvedValue(
                key=f"{section}.{key}",
                value=getattr(config, field_name),
                source=source,
                env_var=env_name if source == "env var" else None,
            )
        )
    return ConfigShowOutput(path=path.as_posix(), values=tuple(values))
