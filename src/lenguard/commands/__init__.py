"""Subcommand modules for lenguard.

Provides register_commands() which uses deferred imports to keep
``lenguard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from lenguard.commands.adapters import adapters
    from lenguard.commands.check import check
    from lenguard.commands.measure import measure

    cli.add_command(check)
    cli.add_command(measure)
    cli.add_command(adapters)
