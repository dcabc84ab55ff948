# topmark:header:start
#
#   project      : Harmonizer
#   file         : errors.py
#   file_relpath : src/harmonizer/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Harmonizer CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from harmonizer.cli.exit_codes import ExitCode


class HarmonizerCliError(click.ClickException):
    """Base class for all Harmonizer CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class HarmonizerUsageError(HarmonizerCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class HarmonizerDecodeError(HarmonizerCliError):
    """Error for engine output containing a malformed diagnostic."""

    exit_code = ExitCode.DECODE_ERROR


class HarmonizerFileNotFoundError(HarmonizerCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HarmonizerIOError(HarmonizerCliError):
    """Error for I/O errors reading input."""

    exit_code = ExitCode.IO_ERROR


class HarmonizerConfigError(HarmonizerCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
