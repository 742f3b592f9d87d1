# topmark:header:start
#
#   project      : ModDoc
#   file         : errors.py
#   file_relpath : src/moddoc/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ModDoc CLI.

Library code raises plain Python exceptions (``OSError``, ``UnicodeDecodeError``,
``ConfigParseError``, ``SettingsError``). Commands translate them with
`translate_error` into the Click exceptions below, which carry a
standardized message and exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from moddoc.cli.exit_codes import ExitCode


class ModdocError(click.ClickException):
    """Base class for all ModDoc CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ModdocUsageError(ModdocError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ModdocConfigError(ModdocError):
    """Error for a malformed mapping file or invalid tool settings."""

    exit_code = ExitCode.CONFIG_ERROR


class ModdocFileNotFoundError(ModdocError):
    """Error when a mapping, Markdown or target file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ModdocPermissionDeniedError(ModdocError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class ModdocIOError(ModdocError):
    """Error for other I/O failures reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class ModdocEncodingError(ModdocError):
    """Error for files that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


def translate_error(exc: BaseException, *, context: str) -> ModdocError:
    """Map a library exception to the matching CLI error.

    Args:
        exc (BaseException): The exception raised by the library layer.
        context (str): What was being done, e.g. ``"reading modoc.config"``.

    Returns:
        ModdocError: The CLI error to raise (``raise ... from exc``).
    """
    # Local import keeps the CLI error module free of config-layer imports at load time.
    from moddoc.config.parser import ConfigParseError
    from moddoc.config.settings import SettingsError

    if isinstance(exc, (ConfigParseError, SettingsError)):
        return ModdocConfigError(f"{context}: {exc}")
    if isinstance(exc, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
        return ModdocFileNotFoundError(f"{context}: {exc}")
    if isinstance(exc, PermissionError):
        return ModdocPermissionDeniedError(f"{context}: {exc}")
    if isinstance(exc, UnicodeDecodeError):
        return ModdocEncodingError(f"{context}: not valid UTF-8 ({exc.reason} at byte {exc.start})")
    if isinstance(exc, OSError):
        return ModdocIOError(f"{context}: {exc}")
    return ModdocError(f"{context}: {exc}")
