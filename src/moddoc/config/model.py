# topmark:header:start
#
#   project      : ModDoc
#   file         : model.py
#   file_relpath : src/moddoc/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable mapping entries read from ``modoc.config``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigEntry:
    """One ``"<markdown>" = [ "<target>", ... ]`` line of the mapping file.

    Attributes:
        markdown_path (str): Path of the Markdown document, as written in the file.
        target_paths (tuple[str, ...]): Paths of the source files to document, in
            textual order.
        line_number (int): 1-based line number of the entry (0 when built in code).
    """

    markdown_path: str
    target_paths: tuple[str, ...]
    line_number: int = 0

    def to_line(self) -> str:
        """Render the entry back in canonical mapping-file syntax."""
        targets: str = ", ".join(f'"{t}"' for t in self.target_paths)
        return f'"{self.markdown_path}" = [ {targets} ]'
