# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : errors.py
#   file_relpath : src/canonrepr/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Exceptions for the CanonRepr CLI.

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

from canonrepr.cli.exit_codes import ExitCode


class CanonReprCliError(click.ClickException):
    """Base class for all CanonRepr CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class CanonReprUsageError(CanonReprCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CanonReprConfigError(CanonReprCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class CanonReprFileNotFoundError(CanonReprCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CanonReprEncodingError(CanonReprCliError):
    """Error for input that cannot be decoded or parsed."""

    exit_code = ExitCode.ENCODING_ERROR
