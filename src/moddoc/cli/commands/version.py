# topmark:header:start
#
#   project      : ModDoc
#   file         : version.py
#   file_relpath : src/moddoc/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ModDoc ``version`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from moddoc.cli.cmd_common import get_console
from moddoc.constants import MODDOC_VERSION

if TYPE_CHECKING:
    from moddoc.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ModDoc.",
)
def version_command() -> None:
    """Print the ModDoc version installed in the active environment."""
    console: ConsoleLike = get_console(click.get_current_context())
    console.print(MODDOC_VERSION)
