"""Config loader tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from colprint.lib.config.settings import (
    ColprintConfig,
    load_config,
    resolve_project_root,
)
from colprint.lib.errors import ConfigError
from colprint.lib.template import RenderMode


def _install_config(project_root: Path, content: str) -> None:
    project_root.mkdir(parents=True, exist_ok=True)
    (project_root / ".colprint.toml").write_text(content, encoding="utf-8")


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == ColprintConfig()


def test_load_config_reads_sections(tmp_path: Path) -> None:
    _install_config(
        tmp_path,
        (
            "[defaults]\n"
            "separator = ' || '\n"
            "mode = 'pretty-debug'\n"
            "\n"
            "[render]\n"
            "pretty_width = 40\n"
        ),
    )

    assert load_config(tmp_path) == ColprintConfig(
        separator=" || ",
        mode=RenderMode.PRETTY_DEBUG,
        pretty_width=40,
    )


def test_load_config_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _install_config(tmp_path, "[defaults]\nmode = 'display'\nseparator = ' # '\n")
    monkeypatch.setenv("COLPRINT_MODE", "DEBUG")
    monkeypatch.setenv("COLPRINT_PRETTY_WIDTH", " 30 ")

    loaded = load_config(tmp_path)

    assert loaded.mode == RenderMode.DEBUG
    assert loaded.pretty_width == 30
    assert loaded.separator == " # "


def test_load_config_warns_on_unknown_keys(
    caplog: pytest.LogCaptureFixture,
    tmp_path: Path,
) -> None:
    _install_config(tmp_path, "[defaults]\ncolour = 'red'\n\n[extra]\nkey = 1\n")

    with caplog.at_level(logging.WARNING, logger="colprint.lib.config.settings"):
        loaded = load_config(tmp_path)

    assert loaded == ColprintConfig()
    assert "defaults.colour" in caplog.text
    assert "'extra'" in caplog.text


@pytest.mark.parametrize(
    "content,message",
    [
        pytest.param("[defaults]\nmode = 'loud'\n", "defaults.mode", id="bad-mode"),
        pytest.param("[defaults]\nseparator = 3\n", "expected str", id="separator-type"),
        pytest.param("[render]\npretty_width = true\n", "expected int", id="width-bool"),
        pytest.param("[render]\npretty_width = 0\n", ">= 1", id="width-zero"),
        pytest.param("defaults = 3\n", "expected table", id="section-type"),
        pytest.param("[defaults\n", "Invalid TOML", id="bad-toml"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, content: str, message: str) -> None:
    _install_config(tmp_path, content)

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)


def test_invalid_env_override_is_a_value_error(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("COLPRINT_PRETTY_WIDTH", "wide")

    with pytest.raises(ValueError, match="COLPRINT_PRETTY_WIDTH"):
        load_config(tmp_path)


def test_resolve_project_root_precedence(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    project = tmp_path / "project"
    nested = project / "a" / "b"
    nested.mkdir(parents=True)
    _install_config(project, "[defaults]\n")
    monkeypatch.chdir(nested)

    assert resolve_project_root() == project.resolve()

    monkeypatch.setenv("COLPRINT_ROOT", str(tmp_path))
    assert resolve_project_root() == tmp_path.resolve()

    explicit = tmp_path / "explicit"
    assert resolve_project_root(explicit) == explicit.resolve()
