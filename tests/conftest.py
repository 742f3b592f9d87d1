# topmark:header:start
#
#   project      : ModDoc
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ModDoc test suite.

Sets up global fixtures and the logging configuration for test runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from moddoc.config import logging

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_moddoc_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    monkeypatch.delenv("MODDOC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo the root handler swap performed by ``setup_logging`` inside CLI runs.

    The CLI binds its handler to the runner's temporary stderr, which is closed
    once the invocation returns.
    """
    root = logging.logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an empty project directory that is also the working directory."""
    root: Path = tmp_path / "proj"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def write_files(project: Path) -> Callable[[dict[str, str]], None]:
    """Return a helper that writes ``{relative_path: text}`` into the project."""

    def _write(files: dict[str, str]) -> None:
        for rel, text in files.items():
            path: Path = project / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(text.encode("utf-8"))

    return _write
