# topmark:header:start
#
#   project      : ModDoc
#   file         : diff.py
#   file_relpath : src/moddoc/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview for ``--diff``."""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk


def unified_diff(original: str, updated: str, *, path: str) -> list[str]:
    """Return the unified diff between two versions of ``path`` (empty if equal)."""
    return list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (updated)",
        )
    )


def render_patch(patch: Sequence[str] | str, *, color: bool = True) -> str:
    """Render a unified diff, colorized by line kind.

    Args:
        patch: A unified diff as a sequence of lines or a single multiline string.
        color: Whether to emit ANSI colors.

    Returns:
        The rendered diff, one line per diff line.
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)

    def process_line(line: str) -> str:
        content = line.rstrip("\n").replace("\r", "\\r")
        if not color or not content:
            return content
        match content[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    return "".join(f"{process_line(line)}\n" for line in lines)
