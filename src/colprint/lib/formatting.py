"""Text-format protocol shared by library results and the CLI emitter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Knobs passed to ``format_text()`` implementations."""

    verbosity: int = 0  # 0=normal, 1+=verbose


@runtime_checkable
class TextFormattable(Protocol):
    """Result types that know how to print themselves as plain text."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...
