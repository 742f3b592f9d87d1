# topmark:header:start
#
#   project      : ModDoc
#   file         : merger.py
#   file_relpath : src/moddoc/merger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Merge a Markdown document into a source file as module documentation.

The merge is line based:

1. The Markdown document is trimmed as a whole and every line becomes
   ``<marker> <line>``.
2. Every line of the target that starts with the marker (at column 0, no
   leading whitespace allowed) is dropped; all other lines are kept in order.
3. The result is the new documentation block followed by the kept lines, each
   terminated by a single ``\n``.

Because step 2 removes whatever a previous run inserted, the merge is idempotent
for unchanged Markdown. Lines are split on ``\n`` with a ``\r`` directly before
it removed, so CRLF targets are normalized to LF. The Markdown is trimmed with
``str.strip``, which also treats the ASCII separators ``\x1c``-``\x1f`` as
whitespace.

Writes replace the target in place. They are not atomic and no backup is kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from moddoc.config.logging import get_logger
from moddoc.constants import DEFAULT_MARKER
from moddoc.utils.text import split_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from moddoc.config.logging import ModdocLogger

logger: ModdocLogger = get_logger(__name__)


@dataclass
class MergeResult:
    """Outcome of merging one Markdown document into one target.

    Attributes:
        markdown_path (Path): The Markdown source.
        target_path (Path): The documented source file.
        original (str): Target content before the merge.
        updated (str): Target content after the merge.
        written (bool): Whether ``updated`` was written to ``target_path``.
    """

    markdown_path: Path
    target_path: Path
    original: str
    updated: str
    written: bool = False

    @property
    def changed(self) -> bool:
        """True if the merge alters the target content."""
        return self.original != self.updated


def render_doc_lines(markdown: str, marker: str = DEFAULT_MARKER) -> list[str]:
    """Render the trimmed Markdown document as marker-prefixed comment lines.

    Args:
        markdown (str): The Markdown document.
        marker (str): Documentation line prefix.

    Returns:
        list[str]: One ``"<marker> <line>\\n"`` entry per Markdown line.
    """
    return [f"{marker} {line}\n" for line in split_lines(markdown.strip())]


def strip_doc_lines(lines: Iterable[str], marker: str = DEFAULT_MARKER) -> list[str]:
    """Drop lines starting with ``marker`` and terminate the rest with ``\\n``."""
    return [f"{line}\n" for line in lines if not line.startswith(marker)]


def merge_text(markdown: str, target: str, marker: str = DEFAULT_MARKER) -> str:
    """Return ``target`` with its documentation block replaced by ``markdown``.

    Raises:
        ValueError: If ``marker`` is empty.
    """
    if not marker:
        raise ValueError("marker must be a non-empty string")
    doc_lines: list[str] = render_doc_lines(markdown, marker)
    body_lines: list[str] = strip_doc_lines(split_lines(target), marker)
    return "".join(doc_lines + body_lines)


def read_markdown(path: Path) -> str:
    """Read a Markdown document as strict UTF-8 text."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def read_target(path: Path) -> str:
    """Read a target file as bytes and decode it as strict UTF-8."""
    with path.open("rb") as fh:
        data: bytes = fh.read()
    return data.decode("utf-8")


def write_target(path: Path, text: str) -> int:
    """Overwrite ``path`` with ``text`` (UTF-8, no newline translation).

    Returns:
        int: Number of bytes written.
    """
    data: bytes = text.encode("utf-8")
    with path.open("wb") as fh:
        fh.write(data)
    return len(data)


def merge(
    markdown_path: Path | str,
    target_path: Path | str,
    *,
    marker: str = DEFAULT_MARKER,
    write: bool = True,
    original: str | None = None,
) -> MergeResult:
    """Merge ``markdown_path`` into ``target_path``.

    Args:
        markdown_path (Path | str): The Markdown document to render.
        target_path (Path | str): The source file to document.
        marker (str): Documentation line prefix.
        write (bool): Overwrite the target with the merged content. When False the
            file system is left untouched.
        original (str | None): Current target content, when already known (dry-run
            overlays); the target is read from disk otherwise.

    Returns:
        MergeResult: The original and updated content.

    Raises:
        OSError: If a file cannot be read or the target cannot be written.
        UnicodeDecodeError: If either file is not valid UTF-8.
        ValueError: If ``marker`` is empty.
    """
    md = Path(markdown_path)
    target = Path(target_path)

    markdown: str = read_markdown(md)
    if original is None:
        original = read_target(target)
    updated: str = merge_text(markdown, original, marker)

    result = MergeResult(markdown_path=md, target_path=target, original=original, updated=updated)
    if write:
        written: int = write_target(target, updated)
        result.written = True
        logger.debug("wrote %d bytes to %s", written, target)
    else:
        logger.debug("dry-run: %s left untouched (changed=%s)", target, result.changed)
    return result
