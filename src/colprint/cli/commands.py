"""CLI command handlers for render, parse and config operations."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING, Annotated, Any

from cyclopts import Parameter

from colprint.lib.ops import (
    ConfigShowInput,
    ParseTemplateInput,
    RenderFilesInput,
    config_show_sync,
    parse_template_sync,
    render_files_sync,
)

if TYPE_CHECKING:
    from cyclopts import App

Emitter = Callable[[Any], None]


def _render(
    emit: Emitter,
    *paths: Annotated[str, Parameter(help="Files to print side by side; '-' reads stdin.")],
    template: Annotated[
        str | None,
        Parameter(name="--template", help="Column template, e.g. '{} | {:?}'."),
    ] = None,
    json_values: Annotated[
        bool,
        Parameter(name="--json-values", help="Parse each file as JSON before rendering."),
    ] = False,
    pretty_width: Annotated[
        int | None,
        Parameter(name="--pretty-width", help="Line width for pretty debug columns."),
    ] = None,
) -> None:
    emit(
        render_files_sync(
            RenderFilesInput(
                paths=tuple(paths),
                template=template,
                json_values=json_values,
                pretty_width=pretty_width,
            )
        )
    )


def _parse(emit: Emitter, template: str) -> None:
    emit(parse_template_sync(ParseTemplateInput(template=template)))


def _config_show(emit: Emitter) -> None:
    emit(config_show_sync(ConfigShowInput()))


_COMMANDS: tuple[tuple[str, Callable[..., None], str], ...] = (
    ("render", _render, "Print files side by side as aligned columns."),
    ("parse", _parse, "Show the columns a template describes."),
)


def register_commands(app: App, config_app: App, emit: Emitter) -> dict[str, str]:
    """Attach command handlers bound to *emit*; returns name -> description."""

    descriptions: dict[str, str] = {}
    for name, func, description in _COMMANDS:
        handler = partial(func, emit)
        handler.__name__ = f"cmd_{name}"
        app.command(handler, name=name, help=description)
        descriptions[name] = description

    show = partial(_config_show, emit)
    show.__name__ = "cmd_config_show"
    config_app.command(show, name="show", help="Show resolved config values and their sources.")
    descriptions["config.show"] = "Show resolved config values and their sources."
    return descriptions
