# topmark:header:start
#
#   project      : ModDoc
#   file         : check.py
#   file_relpath : src/moddoc/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ModDoc ``check`` command.

Dry run of ``apply``: computes every merge without writing anything and exits
with ``WOULD_CHANGE`` (2) when at least one target is out of date. Useful as a
CI or pre-commit gate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from moddoc.cli.cmd_common import (
    build_settings,
    display_path,
    emit_diffs,
    get_console,
    load_mapping,
    run_merges,
)
from moddoc.cli.exit_codes import ExitCode
from moddoc.cli.options import common_config_options

if TYPE_CHECKING:
    from moddoc.cli.console import ConsoleLike


@click.command(
    name="check",
    help="Report targets whose documentation is out of date (nothing is written).",
)
@common_config_options
@click.option("--diff", is_flag=True, help="Show a unified diff of every file that would change.")
def check_command(
    *,
    config_path: str | None = None,
    marker: str | None = None,
    diff: bool = False,
) -> None:
    """Run every configured merge in dry-run mode.

    Exit Status:
      SUCCESS (0): Every target is up to date.
      WOULD_CHANGE (2): At least one target would change.
      Other codes as for ``apply``.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    settings = build_settings(config_path=config_path, marker=marker)
    entries = load_mapping(ctx, settings)
    results = run_merges(ctx, settings, entries, apply=False)

    if diff:
        emit_diffs(console, results, color=ctx.obj.get("color_enabled", False))

    stale: list[str] = []
    for result in results:
        shown = display_path(result.target_path)
        if result.changed and shown not in stale:
            stale.append(shown)
    for shown in stale:
        console.print(console.styled(f"would update {shown}", fg="yellow"))

    if stale:
        ctx.exit(ExitCode.WOULD_CHANGE)
    console.print(console.styled("all targets up to date", fg="green"))
