# topmark:header:start
#
#   project      : ModDoc
#   file         : constants.py
#   file_relpath : src/moddoc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ModDoc Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

MODDOC_VERSION: str = get_version("moddoc")

# Mapping file looked up in the current working directory.
DEFAULT_CONFIG_NAME: str = "modoc.config"

# Tool settings live under [tool.moddoc] in this file.
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Prefix of a generated documentation line (Rust inner doc comment).
DEFAULT_MARKER: str = "//!"

LOG_LEVEL_ENV_VAR: str = "MODDOC_LOG_LEVEL"
