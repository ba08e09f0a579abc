"""Config discovery and parsing helpers."""

from colprint.lib.config.settings import (
    ColprintConfig,
    load_config,
    resolve_project_root,
)

__all__ = ["ColprintConfig", "load_config", "resolve_project_root"]
