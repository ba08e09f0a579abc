"""Shared pytest fixtures for library and CLI checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]

_COLPRINT_ENV_VARS = (
    "COLPRINT_ROOT",
    "COLPRINT_SEPARATOR",
    "COLPRINT_MODE",
    "COLPRINT_PRETTY_WIDTH",
)


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def _clean_colprint_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _COLPRINT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def cli_env(package_root: Path, tmp_path: Path) -> dict[str, str]:
    env = {key: value for key, value in os.environ.items() if key not in _COLPRINT_ENV_VARS}
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}{os.pathsep}{existing}"
    env["PYTHONIOENCODING"] = "utf-8"
    # Keep the developer's own .colprint.toml out of CLI runs.
    project_root = tmp_path / "project"
    project_root.mkdir(exist_ok=True)
    env["COLPRINT_ROOT"] = str(project_root)
    return env


@pytest.fixture
def run_colprint(package_root: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(
        args: list[str],
        timeout: float = 15.0,
        env: dict[str, str] | None = None,
    ) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "colprint", *args],
            cwd=package_root,
            env={**cli_env, **(env or {})},
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
