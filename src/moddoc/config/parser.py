# topmark:header:start
#
#   project      : ModDoc
#   file         : parser.py
#   file_relpath : src/moddoc/config/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser for the ``modoc.config`` mapping file.

Grammar, one entry per non-blank line::

    "<markdown-path>" = [ "<target-path-1>", "<target-path-2>", ... ]

Notes:
    - Only zero-length lines are blank; a whitespace-only line is malformed.
    - There is no escaping: a path may contain neither ``=`` nor ``,``, and the
      characters between the quotes are taken verbatim.
    - Array segments are split on every ``,`` (no nesting or quote awareness),
      then each segment is parsed as a quoted string.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from moddoc.config.logging import get_logger
from moddoc.config.model import ConfigEntry
from moddoc.utils.text import split_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from moddoc.config.logging import ModdocLogger

logger: ModdocLogger = get_logger(__name__)


class ConfigParseError(ValueError):
    """Malformed line in the mapping file.

    Attributes:
        message (str): Human-readable description of the problem.
        line_number (int | None): 1-based line number, when known.
        line (str | None): Offending line text, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"

    def at(self, line_number: int, line: str) -> ConfigParseError:
        """Return a copy of this error located at ``line_number``."""
        return ConfigParseError(self.message, line_number=line_number, line=line)


def parse_string(text: str) -> str:
    """Parse a double-quoted token and return its interior.

    Args:
        text (str): Raw token; surrounding whitespace is ignored.

    Returns:
        str: The characters between the quotes, unmodified.

    Raises:
        ConfigParseError: If the trimmed token is not at least two characters long
            or does not start and end with ``"``.
    """
    s = text.strip()
    if len(s) < 2 or not s.startswith('"') or not s.endswith('"'):
        raise ConfigParseError(f"expecting string in quotes, got {s!r}")
    return s[1:-1]


def parse_array(text: str) -> list[str]:
    """Split a bracketed array token into its raw, untrimmed segments.

    Raises:
        ConfigParseError: If the trimmed token is not enclosed in ``[`` and ``]``.
    """
    s = text.strip()
    if len(s) < 2 or not s.startswith("[") or not s.endswith("]"):
        raise ConfigParseError(f"expecting brackets around {s!r}")
    return s[1:-1].split(",")


def _parse_path(text: str) -> str:
    path = parse_string(text)
    if not path:
        raise ConfigParseError("expecting a non-empty path")
    return path


def parse_line(line: str) -> tuple[str, list[str]]:
    """Parse one ``STRING = ARRAY`` line.

    Args:
        line (str): A single non-blank mapping line without its terminator.

    Returns:
        tuple[str, list[str]]: The Markdown path and the ordered target paths.

    Raises:
        ConfigParseError: If the line does not contain exactly one ``=`` or either
            side is malformed.
    """
    parts: list[str] = line.split("=")
    if len(parts) < 2:
        raise ConfigParseError("missing right-hand side (expecting '=')")
    if len(parts) > 2:
        raise ConfigParseError("expecting only one '='")
    lhs, rhs = parts
    markdown: str = _parse_path(lhs)
    targets: list[str] = [_parse_path(segment) for segment in parse_array(rhs)]
    return markdown, targets


def parse_config(lines: Iterable[str]) -> list[ConfigEntry]:
    """Parse mapping lines into entries, preserving file order.

    Args:
        lines (Iterable[str]): Lines of the mapping file; a trailing ``\\n`` or
            ``\\r\\n`` terminator on each line is ignored. A ``\\r`` without a
            following ``\\n`` is part of the line.

    Returns:
        list[ConfigEntry]: One entry per non-blank line.

    Raises:
        ConfigParseError: On the first malformed line, with its line number.
    """
    entries: list[ConfigEntry] = []
    for line_number, raw in enumerate(lines, start=1):
        line: str = raw
        if line.endswith("\n"):
            line = line[:-1].removesuffix("\r")
        if len(line) == 0:
            continue
        try:
            markdown, targets = parse_line(line)
        except ConfigParseError as exc:
            raise exc.at(line_number, line) from None
        entry = ConfigEntry(markdown, tuple(targets), line_number)
        logger.trace("parsed entry: %s", entry)
        entries.append(entry)
    return entries


def load_config(path: Path | str) -> list[ConfigEntry]:
    """Read and parse a mapping file.

    Raises:
        OSError: If the file cannot be opened (e.g. ``FileNotFoundError``).
        UnicodeDecodeError: If the file is not valid UTF-8.
        ConfigParseError: If a line is malformed.
    """
    path = Path(path)
    logger.debug("loading mapping file %s", path)
    with path.open("r", encoding="utf-8", newline="") as fh:
        text: str = fh.read()
    entries: list[ConfigEntry] = parse_config(split_lines(text))
    logger.info("loaded %d mapping entries from %s", len(entries), path)
    return entries
