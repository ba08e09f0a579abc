"""Capability-tagged values and their per-mode text rendering."""

from __future__ import annotations

import pprint
from dataclasses import dataclass
from typing import TypeAlias

from colprint.lib.template import RenderMode

DEFAULT_PRETTY_WIDTH = 80


@dataclass(frozen=True, slots=True)
class DisplayItem:
    """A value rendered through ``str()`` whatever the column asks for."""

    value: object


@dataclass(frozen=True, slots=True)
class DebugItem:
    """A value rendered through ``repr()``, or ``pprint`` in pretty columns."""

    value: object


FormattableItem: TypeAlias = DisplayItem | DebugItem


def as_item(value: object) -> FormattableItem:
    """Wrap a bare value as a display item; tagged items pass through."""

    if isinstance(value, (DisplayItem, DebugItem)):
        return value
    return DisplayItem(value)


def split_lines(text: str) -> tuple[str, ...]:
    """Split on line feeds, dropping a trailing CR per line.

    A final line break does not open an extra empty line.

    >>> split_lines("a\\r\\nb\\n")
    ('a', 'b')
    >>> split_lines("")
    ()
    """

    if not text:
        return ()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tuple(line[:-1] if line.endswith("\r") else line for line in lines)


def _render_text(item: FormattableItem, mode: RenderMode, pretty_width: int) -> str:
    if isinstance(item, DisplayItem):
        return str(item.value)
    if mode is RenderMode.PRETTY_DEBUG:
        return pprint.pformat(item.value, width=pretty_width, sort_dicts=False)
    # Debug-only values fall back to repr() in display columns too.
    return repr(item.value)


def render_item(
    item: FormattableItem,
    mode: RenderMode,
    *,
    pretty_width: int = DEFAULT_PRETTY_WIDTH,
) -> tuple[str, ...]:
    """Render one value under *mode* into the lines of its cell."""

    return split_lines(_render_text(item, mode, pretty_width))
