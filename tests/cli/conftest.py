# topmark:header:start
#
#   project      : ModDoc
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

The ``project`` fixture makes the temporary project the working directory, so
``moddoc`` finds ``modoc.config`` there exactly as when run from a real
project root.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import pytest
from click.testing import CliRunner, Result

from moddoc.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def run_cli(project: Path) -> Callable[[Sequence[str]], Result]:
    """Return a helper invoking the CLI from the project directory.

    Args:
        project (Path): The temporary project root (already the CWD).

    Returns:
        Callable[[Sequence[str]], Result]: Invokes ``moddoc`` with the given argv
            and returns the `click.testing.Result`.
    """

    def _run(argv: Sequence[str]) -> Result:
        return CliRunner().invoke(cli, list(argv), catch_exceptions=False)

    return _run
