# topmark:header:start
#
#   project      : ModDoc
#   file         : apply.py
#   file_relpath : src/moddoc/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ModDoc ``apply`` command (also the default action of ``moddoc``).

Reads the mapping file and, for every (Markdown, target) pair in file order,
replaces the target's generated documentation block with the Markdown content.

Examples:
  Apply the mapping in the current directory:

    $ moddoc

  Use another mapping file and comment marker:

    $ moddoc apply --config docs/modoc.config --marker "///"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from moddoc.cli.cmd_common import (
    build_settings,
    emit_diffs,
    get_console,
    load_mapping,
    run_merges,
)
from moddoc.cli.options import common_config_options
from moddoc.config.logging import get_logger

if TYPE_CHECKING:
    from moddoc.cli.console import ConsoleLike
    from moddoc.config.logging import ModdocLogger

logger: ModdocLogger = get_logger(__name__)


@click.command(
    name="apply",
    help="Write Markdown documentation into the configured source files.",
)
@common_config_options
@click.option("--diff", is_flag=True, help="Show a unified diff of every changed file.")
def apply_command(
    *,
    config_path: str | None = None,
    marker: str | None = None,
    diff: bool = False,
) -> None:
    """Apply every configured merge and overwrite the targets.

    Args:
        config_path (str | None): Mapping file override.
        marker (str | None): Documentation marker override.
        diff (bool): Print unified diffs of the changes.

    Raises:
        ModdocConfigError: If the mapping file or settings are malformed.
        ModdocFileNotFoundError: If a file is missing.
        ModdocPermissionDeniedError: If a file cannot be read or written.
        ModdocEncodingError: If a file is not valid UTF-8.
        ModdocIOError: On any other I/O failure.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    settings = build_settings(config_path=config_path, marker=marker)
    entries = load_mapping(ctx, settings)
    results = run_merges(ctx, settings, entries, apply=True)

    if diff:
        emit_diffs(console, results, color=ctx.obj.get("color_enabled", False))
    logger.info(
        "applied %d merge(s); %d file(s) changed", len(results), sum(r.changed for r in results)
    )
