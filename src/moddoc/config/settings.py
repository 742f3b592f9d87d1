# topmark:header:start
#
#   project      : ModDoc
#   file         : settings.py
#   file_relpath : src/moddoc/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tool settings: which mapping file to read and which marker to use.

Settings are layered with increasing precedence:

1. Built-in defaults (``modoc.config`` and ``//!``).
2. The ``[tool.moddoc]`` table of ``pyproject.toml`` in the working directory.
3. Explicit CLI options.

Example ``pyproject.toml`` table::

    [tool.moddoc]
    config = "docs/modoc.config"
    marker = "//!"

Parsing is done with `tomlkit` and unwrapped to plain Python values.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from moddoc.config.logging import get_logger
from moddoc.constants import DEFAULT_CONFIG_NAME, DEFAULT_MARKER, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from moddoc.config.logging import ModdocLogger

logger: ModdocLogger = get_logger(__name__)


class Toml:
    """Section and key names of the ``[tool.moddoc]`` table."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_MODDOC: Final[str] = "moddoc"

    KEY_CONFIG: Final[str] = "config"
    KEY_MARKER: Final[str] = "marker"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_CONFIG, KEY_MARKER})


class SettingsError(ValueError):
    """Invalid tool settings (malformed ``pyproject.toml`` or bad values)."""


@dataclass(frozen=True)
class Settings:
    """Resolved tool settings.

    Attributes:
        config_path (Path): Mapping file to read.
        marker (str): Prefix identifying generated documentation lines.
    """

    config_path: Path = Path(DEFAULT_CONFIG_NAME)
    marker: str = DEFAULT_MARKER

    @property
    def base_dir(self) -> Path:
        """Directory that relative paths in the mapping file are resolved against."""
        return self.config_path.parent


def _validate_marker(marker: str, *, source: str) -> str:
    if not marker or marker.isspace():
        raise SettingsError(f"{source}: marker must be a non-empty string")
    return marker


def load_pyproject_table(path: Path) -> dict[str, Any]:
    """Return the ``[tool.moddoc]`` table of ``path`` as a plain dict.

    A missing file or a file without the table yields an empty dict.

    Raises:
        SettingsError: If the file is not valid TOML or the table is not a table.
    """
    if not path.is_file():
        logger.debug("no %s found at %s", PYPROJECT_TOML_NAME, path)
        return {}
    try:
        doc: dict[str, Any] = tomlkit.parse(path.read_text(encoding="utf-8")).unwrap()
    except TomlkitParseError as exc:
        raise SettingsError(f"{path}: invalid TOML: {exc}") from exc

    tool: Any = doc.get(Toml.SECTION_TOOL, {})
    table: Any = tool.get(Toml.SECTION_MODDOC, {}) if isinstance(tool, dict) else {}
    if not isinstance(table, dict):
        raise SettingsError(f"{path}: [tool.moddoc] must be a table")
    logger.trace("[tool.moddoc] from %s: %s", path, table)
    return table


def settings_from_table(table: dict[str, Any], *, source: str, base: Settings) -> Settings:
    """Overlay the values of a ``[tool.moddoc]`` table on ``base``.

    Raises:
        SettingsError: If a known key has the wrong type or the marker is empty.
    """
    for key in sorted(set(table) - Toml.ALL_KEYS):
        logger.warning("%s: ignoring unknown key '%s' in [tool.moddoc]", source, key)

    settings = base
    if Toml.KEY_CONFIG in table:
        value = table[Toml.KEY_CONFIG]
        if not isinstance(value, str) or not value:
            raise SettingsError(f"{source}: '{Toml.KEY_CONFIG}' must be a non-empty string")
        settings = replace(settings, config_path=Path(value))
    if Toml.KEY_MARKER in table:
        value = table[Toml.KEY_MARKER]
        if not isinstance(value, str):
            raise SettingsError(f"{source}: '{Toml.KEY_MARKER}' must be a string")
        settings = replace(settings, marker=_validate_marker(value, source=source))
    return settings


def resolve_settings(
    *,
    cwd: Path | None = None,
    config_path: str | Path | None = None,
    marker: str | None = None,
) -> Settings:
    """Resolve settings from defaults, ``pyproject.toml`` and CLI overrides.

    Args:
        cwd (Path | None): Directory holding ``pyproject.toml``; defaults to the
            current working directory. Relative paths are anchored here.
        config_path (str | Path | None): Mapping file override (``--config``).
        marker (str | None): Marker override (``--marker``).

    Returns:
        Settings: The effective settings.

    Raises:
        SettingsError: On malformed ``pyproject.toml`` or invalid values.
    """
    root: Path = cwd or Path.cwd()
    pyproject: Path = root / PYPROJECT_TOML_NAME
    settings: Settings = settings_from_table(
        load_pyproject_table(pyproject), source=str(pyproject), base=Settings()
    )
    if config_path is not None:
        settings = replace(settings, config_path=Path(config_path))
    if marker is not None:
        settings = replace(settings, marker=_validate_marker(marker, source="--marker"))
    if not settings.config_path.is_absolute():
        settings = replace(settings, config_path=root / settings.config_path)
    logger.debug("effective settings: %s", settings)
    return settings
