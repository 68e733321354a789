"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Applies settings (logging, adapters, plugins) and
centralizes output (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from lenguard.output.formatters import format_check, format_table

if TYPE_CHECKING:
    from lenguard.config.settings import LenguardSettings
    from lenguard.domain.result import CheckResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LenguardSettings) -> None:
        self.settings = settings

        from lenguard import configure

        self.plugins = configure(settings)

    def emit(self, result: CheckResult) -> None:
        """Format and output a CheckResult with correct exit semantics.

        * Pass: writes to stdout, returns normally.
        * Fail: writes to stderr, exits with code 1.
        """
        output = format_check(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_table(self, title: str, columns: list[str], rows: list[dict[str, Any]]) -> None:
        """Write a table (or a JSON list with ``--json``) to stdout."""
        click.echo(format_table(title, columns, rows, json_output=self.settings.json_output))
