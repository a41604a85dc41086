"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for macro failures and
the failure reporter used when macros run from the command line.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError, MacroExpansionError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    elif isinstance(exc, MacroExpansionError):
        typer.secho(
            f"{command_name} failed [{exc.kind.value}]: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


class CommandFailureReporter:
    """Keep the last reported failure so a command can render it on exit."""

    def __init__(self) -> None:
        self.last_error: MacroExpansionError | None = None

    def report(self, error: MacroExpansionError) -> None:
        """Record a macro failure."""

        self.last_error = error
