"""Command: show the length of a value under every policy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from lenguard.commands._base import LenCommand
from lenguard.commands.check import parse_value
from lenguard.domain.policies import LengthPolicy

if TYPE_CHECKING:
    from lenguard.commands._context import AppContext


@click.command(
    cls=LenCommand,
    examples="""\
  lenguard measure "naïve"
  lenguard measure --hex "00ff"
  lenguard --json measure "abc" --chars-list""",
)
@click.argument("value")
@click.option("--hex", "hex_input", is_flag=True, help="Treat VALUE as hex-encoded bytes.")
@click.option("--chars-list", is_flag=True, help="Treat VALUE as a list of characters.")
@click.pass_obj
def measure(app: AppContext, value: str, hex_input: bool, chars_list: bool) -> None:
    """Print the length of VALUE under each policy."""
    from lenguard.domain.adapters import measure as measure_value
    from lenguard.domain.errors import UnsupportedTypeError

    subject = parse_value(value, hex_input=hex_input, chars_list=chars_list)
    rows: list[dict[str, Any]] = []
    for policy in LengthPolicy:
        try:
            count: int | None = measure_value(subject, policy)
        except UnsupportedTypeError:
            count = None
        rows.append({"policy": policy.value, "length": count})
    app.emit_table(type(subject).__name__, ["policy", "length"], rows)
