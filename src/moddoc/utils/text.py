# topmark:header:start
#
#   project      : ModDoc
#   file         : text.py
#   file_relpath : src/moddoc/utils/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line splitting shared by the mapping parser and the merger."""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` into lines without terminators.

    Lines end at ``\n`` only. A ``\r`` directly before a ``\n`` belongs to the
    terminator and is dropped; a ``\r`` anywhere else, including at the very end
    of unterminated text, is kept. A final ``\n`` does not open an extra empty
    line, and the empty string has no lines.
    """
    if not text:
        return []
    pieces: list[str] = text.split("\n")
    last: str = pieces.pop()
    lines: list[str] = [p.removesuffix("\r") for p in pieces]
    if last:
        lines.append(last)
    return lines
