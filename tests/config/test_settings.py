# topmark:header:start
#
#   project      : ModDoc
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tool settings: defaults, ``[tool.moddoc]`` and CLI override precedence."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from moddoc.config.settings import (
    Settings,
    SettingsError,
    load_pyproject_table,
    resolve_settings,
)
from moddoc.constants import DEFAULT_CONFIG_NAME, DEFAULT_MARKER


def test_defaults_without_pyproject(tmp_path: Path) -> None:
    settings = resolve_settings(cwd=tmp_path)
    assert settings == Settings(config_path=tmp_path / DEFAULT_CONFIG_NAME, marker=DEFAULT_MARKER)
    assert settings.base_dir == tmp_path


def test_pyproject_table_overrides_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.moddoc]\nconfig = "docs/map.config"\nmarker = "##"\n',
        encoding="utf-8",
    )
    settings = resolve_settings(cwd=tmp_path)
    assert settings.config_path == tmp_path / "docs" / "map.config"
    assert settings.marker == "##"
    assert settings.base_dir == tmp_path / "docs"


def test_cli_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.moddoc]\nconfig = "a.config"\nmarker = "##"\n', encoding="utf-8"
    )
    settings = resolve_settings(cwd=tmp_path, config_path="b.config", marker="///")
    assert settings.config_path == tmp_path / "b.config"
    assert settings.marker == "///"


def test_pyproject_without_table_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.other]\nkey = 1\n', encoding="utf-8")
    assert load_pyproject_table(tmp_path / "pyproject.toml") == {}


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.moddoc\n", encoding="utf-8")
    with pytest.raises(SettingsError, match="invalid TOML"):
        resolve_settings(cwd=tmp_path)


@pytest.mark.parametrize("body", ['marker = ""', "marker = 3", "config = 1", 'config = ""'])
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    (tmp_path / "pyproject.toml").write_text(f"[tool.moddoc]\n{body}\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        resolve_settings(cwd=tmp_path)


def test_empty_marker_override_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="marker"):
        resolve_settings(cwd=tmp_path, marker="")


def test_unknown_keys_are_warned(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.moddoc]\nmarkr = "#"\n', encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        settings = resolve_settings(cwd=tmp_path)
    assert settings.marker == DEFAULT_MARKER
    assert "unknown key 'markr'" in caplog.text
