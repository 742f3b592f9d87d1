# topmark:header:start
#
#   project      : ModDoc
#   file         : dump_config.py
#   file_relpath : src/moddoc/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ModDoc ``dump-config`` command.

Prints the effective settings and the parsed mapping in canonical syntax. The
mapping lines can be fed back to the parser unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from moddoc.cli.cmd_common import build_settings, display_path, get_console, load_mapping
from moddoc.cli.options import common_config_options

if TYPE_CHECKING:
    from moddoc.cli.console import ConsoleLike


@click.command(
    name="dump-config",
    help="Print the effective settings and the parsed mapping.",
)
@common_config_options
def dump_config_command(
    *,
    config_path: str | None = None,
    marker: str | None = None,
) -> None:
    """Dump settings (as comments) followed by one canonical line per entry."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    settings = build_settings(config_path=config_path, marker=marker)
    entries = load_mapping(ctx, settings, show=False)

    console.print(f"# config: {display_path(settings.config_path)}")
    console.print(f"# marker: {settings.marker}")
    for entry in entries:
        console.print(entry.to_line())
