"""Print values side by side as aligned text columns."""

__version__ = "0.1.0"

from colprint.lib.entry import colprint, format_columns, tag_values
from colprint.lib.errors import ColprintError, ConfigError, RenderError
from colprint.lib.items import DebugItem, DisplayItem
from colprint.lib.render import render_columns, write_columns
from colprint.lib.template import ColumnDescriptor, RenderMode, parse_template

__all__ = [
    "ColprintError",
    "ColumnDescriptor",
    "ConfigError",
    "DebugItem",
    "DisplayItem",
    "RenderError",
    "RenderMode",
    "__version__",
    "colprint",
    "format_columns",
    "parse_template",
    "render_columns",
    "tag_values",
    "write_columns",
]
