"""Cyclopts CLI entry point for colprint."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cyclopts import App

from colprint import __version__
from colprint.cli.commands import register_commands
from colprint.cli.output import OutputConfig, normalize_output_format
from colprint.cli.output import emit as emit_output
from colprint.lib.errors import ColprintError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for the current command."""

    return _GLOBAL_OPTIONS.get() or GlobalOptions(output=OutputConfig(format="text"))


def emit(payload: object) -> None:
    """Write command output using current output format settings."""

    emit_output(payload, get_global_options().output)


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    porcelain_mode = False
    output_format: str | None = None
    verbosity = 0
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            cleaned.extend(argv[i:])
            break
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--porcelain":
            porcelain_mode = True
            i += 1
            continue
        if arg == "--format":
            if i + 1 >= len(argv):
                raise SystemExit("--format requires a value")
            output_format = argv[i + 1]
            i += 2
            continue
        if arg.startswith("--format="):
            output_format = arg.partition("=")[2]
            i += 1
            continue
        if arg == "--verbose":
            verbosity += 1
            i += 1
            continue
        if len(arg) > 1 and arg.startswith("-") and set(arg[1:]) == {"v"}:
            verbosity += len(arg) - 1
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    resolved = normalize_output_format(
        requested=output_format,
        json_mode=json_mode,
        porcelain_mode=porcelain_mode,
    )
    return cleaned, GlobalOptions(output=OutputConfig(format=resolved, verbosity=verbosity))


app = App(
    name="colprint",
    help="Print values side by side as aligned text columns.",
    version=__version__,
)
config_app = App(name="config", help="Project config commands")
app.command(config_app, name="config")

_REGISTERED_CLI_DESCRIPTIONS: dict[str, str] = register_commands(app, config_app, emit)


def get_registered_cli_descriptions() -> dict[str, str]:
    """Expose CLI descriptions for help parity tests."""

    return dict(_REGISTERED_CLI_DESCRIPTIONS)


def _operation_error_message(exc: Exception) -> str:
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `colprint` and `python -m colprint`."""

    from colprint.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging before any command runs so warnings land on stderr.
    configure_logging(
        json_mode=options.output.format == "json",
        verbosity=options.output.verbosity,
    )
    logger.debug("Dispatching colprint command: %s", cleaned_args)

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except (ColprintError, ValueError, OSError) as exc:
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)
