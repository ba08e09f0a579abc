"""CLI output emitters: text, json and porcelain."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias, cast

from colprint.lib.formatting import FormatContext, TextFormattable
from colprint.lib.serialization import to_jsonable

OutputFormat = Literal["text", "json", "porcelain"]
JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat
    verbosity: int = 0


def _to_json_value(value: Any) -> JSONValue:
    return cast("JSONValue", to_jsonable(value))


def normalize_output_format(
    *,
    requested: str | None,
    json_mode: bool,
    porcelain_mode: bool,
) -> OutputFormat:
    """Resolve the final output format from flags; text is the default."""

    if json_mode:
        return "json"
    if porcelain_mode:
        return "porcelain"

    if requested is None or requested == "":
        return "text"

    normalized = requested.strip().lower()
    if normalized in {"text", "json", "porcelain"}:
        return cast("OutputFormat", normalized)
    raise SystemExit("--format must be one of: text, json, porcelain")


def _porcelain_value(value: JSONValue) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    return str(value)


def _porcelain_line(payload: dict[str, JSONValue]) -> str:
    return "\t".join(f"{key}={_porcelain_value(payload[key])}" for key in sorted(payload))


def emit(value: Any, config: OutputConfig) -> None:
    """Print one result according to the configured output format."""

    if config.format == "json":
        print(json.dumps(_to_json_value(value), sort_keys=True, ensure_ascii=False))
        return
    if config.format == "porcelain":
        payload = _to_json_value(value)
        if isinstance(payload, dict):
            print(_porcelain_line(cast("dict[str, JSONValue]", payload)))
        else:
            print(payload)
        return
    if isinstance(value, TextFormattable):
        print(value.format_text(FormatContext(verbosity=config.verbosity)))
    else:
        print(json.dumps(_to_json_value(value), sort_keys=True, indent=2, ensure_ascii=False))
