"""Convenience entry point: tag plain values from the template and print.

The renderer itself never looks at how a value was tagged. This layer reads
the template's tokens and decides, value by value, whether it is handed over
as a display item or a debug item.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from colprint.lib.items import (
    DEFAULT_PRETTY_WIDTH,
    DebugItem,
    DisplayItem,
    FormattableItem,
)
from colprint.lib.render import render_columns, write_columns
from colprint.lib.template import RenderMode, classify_mode, parse_template, scan_tokens

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colprint.lib.render import TextSink


def tag_values(template: str, values: Sequence[object]) -> list[FormattableItem]:
    """Pair values with template tokens and tag each one.

    Values past the last token are dropped. Already-tagged items keep their
    tag.
    """

    tokens = scan_tokens(template)
    items: list[FormattableItem] = []
    for token, value in zip(tokens, values):
        if isinstance(value, (DisplayItem, DebugItem)):
            items.append(value)
        elif classify_mode(token) is RenderMode.DISPLAY:
            items.append(DisplayItem(value))
        else:
            items.append(DebugItem(value))
    return items


def format_columns(template: str, *values: object, pretty_width: int | None = None) -> str:
    """Render *values* side by side as described by *template*.

    >>> print(format_columns("{} | {}", "ab", "cdef"), end="")
    ab | cdef
    """

    return render_columns(
        parse_template(template),
        tag_values(template, values),
        pretty_width=DEFAULT_PRETTY_WIDTH if pretty_width is None else pretty_width,
    )


def colprint(
    template: str,
    *values: object,
    file: TextSink | None = None,
    pretty_width: int | None = None,
) -> None:
    """Print *values* side by side to *file* (stdout by default)."""

    write_columns(
        parse_template(template),
        tag_values(template, values),
        sys.stdout if file is None else file,
        pretty_width=DEFAULT_PRETTY_WIDTH if pretty_width is None else pretty_width,
    )
