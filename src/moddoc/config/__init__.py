# topmark:header:start
#
#   project      : ModDoc
#   file         : __init__.py
#   file_relpath : src/moddoc/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for ModDoc.

Exposes the mapping file parser (``modoc.config``), the tool settings resolved
from ``pyproject.toml`` and the CLI, and the logging setup.
"""

from __future__ import annotations

from moddoc.config.model import ConfigEntry
from moddoc.config.parser import ConfigParseError, load_config, parse_config
from moddoc.config.settings import Settings, SettingsError, resolve_settings

__all__ = [
    "ConfigEntry",
    "ConfigParseError",
    "Settings",
    "SettingsError",
    "load_config",
    "parse_config",
    "resolve_settings",
]
