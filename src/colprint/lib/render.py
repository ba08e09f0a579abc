"""Column rendering: turn descriptors plus values into an aligned text block.

Descriptors and values pair up by position and only the shorter list's
worth of columns is rendered. Each value becomes a cell of lines; cells are
laid out row by row, every line padded or cut to its column's width (counted
in code points), with each column's separator printed before the next
column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from colprint.lib.errors import RenderError
from colprint.lib.items import DEFAULT_PRETTY_WIDTH, as_item, render_item

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from colprint.lib.formatting import FormatContext
    from colprint.lib.template import ColumnDescriptor


class TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def fit_width(line: str, width: int) -> str:
    """Cut or right-pad *line* to exactly *width* code points.

    >>> fit_width("héllo", 3), fit_width("ab", 4)
    ('hél', 'ab  ')
    """

    if len(line) > width:
        return line[:width]
    return line.ljust(width)


@dataclass(frozen=True, slots=True)
class ColumnBlock:
    """Rendered cells and resolved widths for one render call."""

    cells: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]
    separators: tuple[str | None, ...]
    row_count: int

    def rows(self) -> Iterator[str]:
        """Yield each aligned output row, without its line break."""

        last_column = len(self.cells) - 1
        for row_index in range(self.row_count):
            pieces: list[str] = []
            for column, cell in enumerate(self.cells):
                line = cell[row_index] if row_index < len(cell) else ""
                pieces.append(fit_width(line, self.widths[column]))
                separator = self.separators[column]
                if column < last_column and separator is not None:
                    pieces.append(separator)
            yield "".join(pieces)

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return "\n".join(self.rows())


def layout_columns(
    descriptors: Sequence[ColumnDescriptor],
    values: Sequence[object],
    *,
    pretty_width: int = DEFAULT_PRETTY_WIDTH,
) -> ColumnBlock:
    """Render each paired value and resolve every column's width."""

    pairs = list(zip(descriptors, values))
    cells = tuple(
        render_item(as_item(value), descriptor.mode, pretty_width=pretty_width)
        for descriptor, value in pairs
    )
    widths = tuple(
        descriptor.width
        if descriptor.width is not None
        else max((len(line) for line in cell), default=0)
        for (descriptor, _), cell in zip(pairs, cells)
    )
    return ColumnBlock(
        cells=cells,
        widths=widths,
        separators=tuple(descriptor.separator for descriptor, _ in pairs),
        row_count=max((len(cell) for cell in cells), default=0),
    )


def render_columns(
    descriptors: Sequence[ColumnDescriptor],
    values: Sequence[object],
    *,
    pretty_width: int = DEFAULT_PRETTY_WIDTH,
) -> str:
    """Return the aligned block; every row ends with a line break."""

    block = layout_columns(descriptors, values, pretty_width=pretty_width)
    return "".join(f"{row}\n" for row in block.rows())


def write_columns(
    descriptors: Sequence[ColumnDescriptor],
    values: Sequence[object],
    sink: TextSink,
    *,
    pretty_width: int = DEFAULT_PRETTY_WIDTH,
) -> None:
    """Write the aligned block to *sink* row by row.

    A failing sink stops the write at once; rows already written stay
    written.
    """

    block = layout_columns(descriptors, values, pretty_width=pretty_width)
    try:
        for row in block.rows():
            sink.write(f"{row}\n")
    except OSError as exc:
        raise RenderError(f"Failed to write column output: {exc}") from exc
