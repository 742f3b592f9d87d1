# topmark:header:start
#
#   project      : ModDoc
#   file         : options.py
#   file_relpath : src/moddoc/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for ModDoc.

This module centralizes reusable options (verbosity, color, settings) and
their resolution logic, so the group and its commands can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, ParamSpec, TypeVar, cast

import click

from moddoc.cli.errors import ModdocUsageError
from moddoc.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)


class ColorMode(Enum):
    """User intent for colorized terminal output (``--color``)."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices: list[str] = [cast("str", e.value) for e in enum_cls]

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Convert a string (case-insensitive) to a member of the Enum."""
        if isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            cast("str", choice.value).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        self.fail(f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}", param, ctx)

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values for shells."""
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        The verbosity as a logging-style level: WARNING by default, INFO for
        ``-v``, DEBUG for ``-vv``, TRACE for ``-vvv`` and ERROR for ``-q``.

    Raises:
        ModdocUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ModdocUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
      2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
         ``NO_COLOR`` (set) → False.
      3. **Auto**: whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v shows the parsed mapping).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress the per-file trace.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color the output: auto (default), always, never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (same as --color=never).",
    )(f)
    return f


def _validate_marker(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and (not value or value.isspace()):
        raise ModdocUsageError("--marker must be a non-empty string")
    return value


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` and ``--marker`` options.

    Both override ``[tool.moddoc]`` in ``pyproject.toml``.
    """
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Mapping file to read (default: modoc.config).",
    )(f)
    f = click.option(
        "--marker",
        "marker",
        type=str,
        default=None,
        callback=_validate_marker,
        help="Prefix of generated documentation lines (default: //!).",
    )(f)
    return f
