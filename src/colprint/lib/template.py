"""Column template parsing.

A template such as ``"{} | {:?} => {:#?}:40"`` describes an ordered list of
columns. Each ``{...}`` token becomes one :class:`ColumnDescriptor`; the
literal text between two tokens is the separator printed between those
columns. The parser is permissive: it never raises, and text it cannot make
sense of (an unterminated ``{``, stray ``}``) is absorbed silently.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

_ASCII_DIGITS = frozenset("0123456789")
_INNER_WIDTH_RE = re.compile(r":([0-9]+)\}\Z")
_MAX_WIDTH_DIGITS = len(str(sys.maxsize))


class RenderMode(StrEnum):
    DISPLAY = "display"
    DEBUG = "debug"
    PRETTY_DEBUG = "pretty_debug"


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    """Layout rules for one column, in template order."""

    mode: RenderMode = RenderMode.DISPLAY
    width: int | None = None  # None = size to content
    separator: str | None = None  # printed after this column, before the next


@dataclass(frozen=True, slots=True)
class _Token:
    text: str
    # Raw digit run of a ``}:N`` suffix; "" when the colon had no digits.
    width_digits: str | None = None


@dataclass(frozen=True, slots=True)
class _Separator:
    text: str


_TemplatePart: TypeAlias = _Token | _Separator


def _split_template(template: str) -> list[_TemplatePart]:
    parts: list[_TemplatePart] = []
    in_token = False
    start = 0
    index = 0
    length = len(template)

    while index < length:
        char = template[index]
        if char == "{" and not in_token:
            if index > start:
                parts.append(_Separator(template[start:index]))
            start = index
            in_token = True
        elif char == "}" and in_token:
            in_token = False
            end = index + 1
            if end < length and template[end] == ":":
                digits_end = end + 1
                while digits_end < length and template[digits_end] in _ASCII_DIGITS:
                    digits_end += 1
                parts.append(_Token(template[start:end], template[end + 1 : digits_end]))
                start = digits_end
                index = digits_end
                continue
            parts.append(_Token(template[start:end]))
            start = end
        index += 1

    # An unterminated "{" swallows everything after it.
    if not in_token and start < length:
        parts.append(_Separator(template[start:]))
    return parts


def scan_tokens(template: str) -> tuple[str, ...]:
    """Return the raw ``{...}`` tokens of *template*, braces included.

    >>> scan_tokens("{} | {:?}:5 {oops")
    ('{}', '{:?}')
    """

    return tuple(part.text for part in _split_template(template) if isinstance(part, _Token))


def classify_mode(token: str) -> RenderMode:
    """Pick the render mode for one raw token by substring containment."""

    if ":#?" in token:
        return RenderMode.PRETTY_DEBUG
    if ":?" in token:
        return RenderMode.DEBUG
    return RenderMode.DISPLAY


def _parse_width(digits: str) -> int | None:
    # Widths past sys.maxsize cannot size a string; treat them as auto.
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_WIDTH_DIGITS:
        return None
    width = int(significant)
    return width if width <= sys.maxsize else None


def _token_width(token: _Token) -> int | None:
    if token.width_digits:
        return _parse_width(token.width_digits)
    # No usable "}:N" suffix: accept a trailing ":N" inside the braces ("{:5}", "{:?:60}").
    match = _INNER_WIDTH_RE.search(token.text)
    if match is None:
        return None
    return _parse_width(match.group(1))


def parse_template(template: str) -> tuple[ColumnDescriptor, ...]:
    """Parse *template* into column descriptors.

    >>> [(column.width, column.separator) for column in parse_template("{:5} | {:?}")]
    [(5, ' | '), (None, None)]
    """

    parts = _split_template(template)
    descriptors: list[ColumnDescriptor] = []
    for index, part in enumerate(parts):
        if not isinstance(part, _Token):
            continue
        separator: str | None = None
        following = parts[index + 1] if index + 1 < len(parts) else None
        # Separators never sit next to each other, so a part after this
        # separator is always the next token.
        if isinstance(following, _Separator) and index + 2 < len(parts):
            separator = following.text
        descriptors.append(
            ColumnDescriptor(
                mode=classify_mode(part.text),
                width=_token_width(part),
                separator=separator,
            )
        )
    return tuple(descriptors)
