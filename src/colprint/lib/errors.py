"""Error types raised by colprint.

Templates never fail to parse and column/value mismatches are resolved by
truncation, so the taxonomy stays small.
"""

from __future__ import annotations


class ColprintError(Exception):
    """Base class for colprint failures."""


class RenderError(ColprintError):
    """The output sink failed while a column block was being written."""


class ConfigError(ColprintError, ValueError):
    """A config file or environment override holds an invalid value."""
