# topmark:header:start
#
#   project      : ModDoc
#   file         : test_parser.py
#   file_relpath : tests/config/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mapping file parser: grammar, failures and line numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from moddoc.config.model import ConfigEntry
from moddoc.config.parser import (
    ConfigParseError,
    load_config,
    parse_array,
    parse_config,
    parse_line,
    parse_string,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_string_trims_surrounding_whitespace() -> None:
    assert parse_string('   "hello"   ') == "hello"


def test_parse_string_keeps_interior_verbatim() -> None:
    assert parse_string('" spaced \\n "') == " spaced \\n "


def test_parse_string_accepts_empty_quotes() -> None:
    assert parse_string('""') == ""


@pytest.mark.parametrize("token", ["hello", '"hello', 'hello"', '"', "", "   ", "'x'"])
def test_parse_string_requires_quotes(token: str) -> None:
    with pytest.raises(ConfigParseError, match="expecting string in quotes"):
        parse_string(token)


def test_parse_array_returns_raw_segments() -> None:
    assert parse_array('   [ "testings"   ,  " asdf "     ]   ') == [
        ' "testings"   ',
        '  " asdf "     ',
    ]


@pytest.mark.parametrize("token", ['"a"', '[ "a"', '"a" ]', "[", "", "{}"])
def test_parse_array_requires_brackets(token: str) -> None:
    with pytest.raises(ConfigParseError, match="expecting brackets"):
        parse_array(token)


def test_parse_line_well_formed() -> None:
    assert parse_line('"test.md" = [ "one.rs", "two.rs" ] ') == ("test.md", ["one.rs", "two.rs"])


def test_parse_line_without_whitespace() -> None:
    assert parse_line('"a.md"=["b.rs","c.rs"]') == ("a.md", ["b.rs", "c.rs"])


def test_parse_line_preserves_target_order() -> None:
    _, targets = parse_line('"a.md" = [ "z.rs", "a.rs", "m.rs" ]')
    assert targets == ["z.rs", "a.rs", "m.rs"]


def test_parse_line_missing_equals() -> None:
    with pytest.raises(ConfigParseError, match="missing right-hand side"):
        parse_line('"a.md" [ "b.rs" ]')


def test_parse_line_two_equals() -> None:
    with pytest.raises(ConfigParseError, match="only one '='"):
        parse_line('"a.md" = [ "b=c.rs" ]')


def test_parse_line_quoted_comma_is_not_special() -> None:
    # The array is split on every comma, so "b,c.rs" yields two malformed segments.
    with pytest.raises(ConfigParseError, match="expecting string in quotes"):
        parse_line('"a.md" = [ "b,c.rs" ]')


def test_parse_line_empty_array_fails() -> None:
    with pytest.raises(ConfigParseError, match="expecting string in quotes"):
        parse_line('"a.md" = [ ]')


@pytest.mark.parametrize("line", ['"" = [ "b.rs" ]', '"a.md" = [ "" ]'])
def test_parse_line_rejects_empty_paths(line: str) -> None:
    with pytest.raises(ConfigParseError, match="non-empty path"):
        parse_line(line)


def test_parse_config_skips_blank_lines_and_keeps_order() -> None:
    lines = [
        '"README.md" = [ "src/main.rs", "src/lib.rs" ]\n',
        "\n",
        '"docs/cli.md" = [ "src/cli.rs" ]\n',
    ]
    assert parse_config(lines) == [
        ConfigEntry("README.md", ("src/main.rs", "src/lib.rs"), 1),
        ConfigEntry("docs/cli.md", ("src/cli.rs",), 3),
    ]


def test_parse_config_handles_crlf_terminators() -> None:
    entries = parse_config(['"a.md" = [ "b.rs" ]\r\n', "\r\n"])
    assert entries == [ConfigEntry("a.md", ("b.rs",), 1)]


def test_parse_config_whitespace_only_line_is_not_blank() -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(['"a.md" = [ "b.rs" ]', "   "])
    assert excinfo.value.line_number == 2
    assert "missing right-hand side" in str(excinfo.value)


def test_parse_config_error_carries_line_number() -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(["", '"a.md" = [ "b.rs" ]', '"c.md" = "d.rs"'])
    err = excinfo.value
    assert err.line_number == 3
    assert err.line == '"c.md" = "d.rs"'
    assert str(err).startswith("line 3: expecting brackets")


def test_parse_config_allows_duplicate_targets() -> None:
    entries = parse_config(['"a.md" = [ "x.rs" ]', '"b.md" = [ "x.rs" ]'])
    assert [e.markdown_path for e in entries] == ["a.md", "b.md"]


def test_entry_to_line_round_trips() -> None:
    entry = ConfigEntry("README.md", ("src/main.rs", "src/lib.rs"), 1)
    assert parse_line(entry.to_line()) == ("README.md", ["src/main.rs", "src/lib.rs"])


def test_load_config_reads_file(tmp_path: Path) -> None:
    cfg = tmp_path / "modoc.config"
    cfg.write_text('"README.md" = [ "src/main.rs" ]\n', encoding="utf-8")
    assert load_config(cfg) == [ConfigEntry("README.md", ("src/main.rs",), 1)]


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "modoc.config")


def test_load_config_splits_on_newline_only(tmp_path: Path) -> None:
    cfg = tmp_path / "modoc.config"
    cfg.write_bytes(b'"a.md" = [ "b.rs" ]\r\n\r\n"c.md" = [ "d.rs" ]\r"e.md" = [ "f.rs" ]\n')
    with pytest.raises(ConfigParseError) as excinfo:
        load_config(cfg)
    assert excinfo.value.line_number == 3
    assert "expecting only one '='" in str(excinfo.value)


def test_parse_config_keeps_unterminated_carriage_return() -> None:
    with pytest.raises(ConfigParseError) as excinfo:
        parse_config(['"a.md" = [ "b.rs" ]\n', "\r"])
    assert excinfo.value.line_number == 2
