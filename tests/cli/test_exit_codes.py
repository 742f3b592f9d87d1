# topmark:header:start
#
#   project      : ModDoc
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI failures map to sysexits-style exit codes and abort the run."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from moddoc.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from click.testing import Result

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_missing_mapping_file(run_cli: Callable[[Sequence[str]], Result]) -> None:
    result = run_cli([])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "modoc.config" in result.output


def test_malformed_mapping_touches_nothing(
    project: Path,
    write_files: Callable[[dict[str, str]], None],
    run_cli: Callable[[Sequence[str]], Result],
) -> None:
    write_files(
        {
            "modoc.config": '"README.md" = [ "lib.rs" ]\n"README.md" = "main.rs"\n',
            "README.md": "Docs",
            "lib.rs": "code\n",
        }
    )

    result = run_cli(["apply"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "line 2" in result.output
    assert "expecting brackets" in result.output
    assert (project / "lib.rs").read_text(encoding="utf-8") == "code\n"


def test_missing_target_aborts_after_earlier_writes(
    project: Path,
    write_files: Callable[[dict[str, str]], None],
    run_cli: Callable[[Sequence[str]], Result],
) -> None:
    write_files(
        {
            "modoc.config": '"README.md" = [ "a.rs", "missing.rs", "b.rs" ]\n',
            "README.md": "Docs",
            "a.rs": "a\n",
            "b.rs": "b\n",
        }
    )

    result = run_cli(["apply"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "missing.rs" in result.output
    assert (project / "a.rs").read_text(encoding="utf-8") == "//! Docs\na\n"
    assert (project / "b.rs").read_text(encoding="utf-8") == "b\n"


def test_invalid_utf8_target(
    project: Path,
    write_files: Callable[[dict[str, str]], None],
    run_cli: Callable[[Sequence[str]], Result],
) -> None:
    write_files({"modoc.config": '"README.md" = [ "lib.rs" ]\n', "README.md": "Docs"})
    (project / "lib.rs").write_bytes(b"\xc3\x28 broken\n")

    result = run_cli(["apply"])

    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output
    assert "not valid UTF-8" in result.output


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root ignores file permissions"
)
def test_unwritable_target(
    project: Path,
    write_files: Callable[[dict[str, str]], None],
    run_cli: Callable[[Sequence[str]], Result],
) -> None:
    write_files({"modoc.config": '"README.md" = [ "lib.rs" ]\n', "README.md": "Docs"})
    target = project / "lib.rs"
    target.write_text("code\n", encoding="utf-8")
    target.chmod(0o444)
    try:
        result = run_cli(["apply"])
    finally:
        target.chmod(0o644)

    assert result.exit_code == ExitCode.PERMISSION_DENIED, result.output


def test_invalid_pyproject_is_config_error(
    write_files: Callable[[dict[str, str]], None],
    run_cli: Callable[[Sequence[str]], Result],
) -> None:
    write_files({"pyproject.toml": "[tool.moddoc]\nmarker = 1\n"})

    result = run_cli(["apply"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_empty_marker_is_usage_error(run_cli: Callable[[Sequence[str]], Result]) -> None:
    result = run_cli(["apply", "--marker", ""])

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def test_verbose_and_quiet_are_exclusive(run_cli: Callable[[Sequence[str]], Result]) -> None:
    result = run_cli(["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
