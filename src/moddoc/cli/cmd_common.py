# topmark:header:start
#
#   project      : ModDoc
#   file         : cmd_common.py
#   file_relpath : src/moddoc/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the ModDoc commands.

Each helper performs one phase of a run (settings, mapping, merging) and
translates library exceptions into CLI errors, so command bodies stay free of
duplicated try/except blocks.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from moddoc.cli.errors import translate_error
from moddoc.config.logging import get_logger
from moddoc.config.parser import ConfigParseError, load_config
from moddoc.config.settings import Settings, SettingsError, resolve_settings
from moddoc.runner import MergeJob, MergeRunner, plan_jobs
from moddoc.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from moddoc.cli.console import ConsoleLike
    from moddoc.config.logging import ModdocLogger
    from moddoc.config.model import ConfigEntry
    from moddoc.merger import MergeResult

logger: ModdocLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by the ``moddoc`` group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved by the group (WARNING by default)."""
    ctx.ensure_object(dict)
    return ctx.obj.get("verbosity_level", logging.WARNING)


def display_path(path: Path) -> str:
    """Render ``path`` relative to the working directory when it lies below it."""
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def build_settings(*, config_path: str | None, marker: str | None) -> Settings:
    """Resolve settings, raising a CLI configuration error on failure."""
    try:
        return resolve_settings(config_path=config_path, marker=marker)
    except SettingsError as exc:
        raise translate_error(exc, context="pyproject.toml [tool.moddoc]") from exc


def load_mapping(
    ctx: click.Context, settings: Settings, *, show: bool = True
) -> list[ConfigEntry]:
    """Load and parse the mapping file and echo it to stderr unless ``-q`` is given.

    Args:
        ctx (click.Context): Current Click context.
        settings (Settings): Effective settings.
        show (bool): Echo the parsed entries; commands that print the mapping
            themselves pass False.

    Raises:
        ModdocError: The translated error when the file is missing, unreadable,
            not UTF-8 or malformed.
    """
    shown: str = display_path(settings.config_path)
    try:
        entries: list[ConfigEntry] = load_config(settings.config_path)
    except (OSError, UnicodeDecodeError, ConfigParseError) as exc:
        raise translate_error(exc, context=f"reading {shown}") from exc

    if show and get_verbosity(ctx) <= logging.WARNING:
        console: ConsoleLike = get_console(ctx)
        noun: str = "entry" if len(entries) == 1 else "entries"
        console.note(console.styled(f"{shown}: {len(entries)} {noun}", bold=True))
        for entry in entries:
            console.note(f"  {entry.line_number:>3}: {entry.to_line()}")
    return entries


def run_merges(
    ctx: click.Context,
    settings: Settings,
    entries: list[ConfigEntry],
    *,
    apply: bool,
) -> list[MergeResult]:
    """Run every configured merge in order, stopping at the first failure.

    Args:
        ctx (click.Context): Current Click context.
        settings (Settings): Effective settings (marker, mapping location).
        entries (list[ConfigEntry]): Parsed mapping entries.
        apply (bool): Write results; False performs a dry run.

    Returns:
        list[MergeResult]: One result per (Markdown, target) pair.

    Raises:
        ModdocError: The translated error of the first failing job. Targets
            written before the failure stay written.
    """
    console: ConsoleLike = get_console(ctx)
    show_trace: bool = get_verbosity(ctx) <= logging.WARNING

    def _announce(job: MergeJob) -> None:
        if show_trace:
            verb: str = "writing" if apply else "checking"
            console.note(
                f"reading {display_path(job.markdown_path)}, "
                f"{verb} {display_path(job.target_path)}"
            )

    jobs: list[MergeJob] = plan_jobs(entries, base_dir=settings.base_dir)
    runner = MergeRunner(marker=settings.marker, apply=apply, on_job=_announce)
    results: list[MergeResult] = []
    for job in jobs:
        try:
            results.append(runner.run_job(job))
        except (OSError, UnicodeDecodeError) as exc:
            raise translate_error(
                exc,
                context=(
                    f"failed to write doc comments of '{display_path(job.markdown_path)}' "
                    f"into '{display_path(job.target_path)}' (line {job.line_number})"
                ),
            ) from exc
    return results


def emit_diffs(console: ConsoleLike, results: list[MergeResult], *, color: bool) -> None:
    """Print a unified diff for every result that changes its target."""
    for result in results:
        if not result.changed:
            continue
        patch: list[str] = unified_diff(
            result.original, result.updated, path=display_path(result.target_path)
        )
        console.print(render_patch(patch, color=color), nl=False)
