"""Core colprint library exports."""

from colprint.lib.items import DebugItem, DisplayItem, FormattableItem
from colprint.lib.render import ColumnBlock, layout_columns, render_columns, write_columns
from colprint.lib.template import ColumnDescriptor, RenderMode, parse_template

__all__ = [
    "ColumnBlock",
    "ColumnDescriptor",
    "DebugItem",
    "DisplayItem",
    "FormattableItem",
    "RenderMode",
    "layout_columns",
    "parse_template",
    "render_columns",
    "write_columns",
]
