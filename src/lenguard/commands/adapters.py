"""Command: list the type adapter table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from lenguard.commands._base import LenCommand
from lenguard.domain.policies import LengthPolicy

if TYPE_CHECKING:
    from lenguard.commands._context import AppContext


def _qualified_name(type_: type) -> str:
    if type_.__module__ == "builtins":
        return type_.__qualname__
    return f"{type_.__module__}.{type_.__qualname__}"


@click.command(
    cls=LenCommand,
    examples="""\
  lenguard adapters
  lenguard --json adapters""",
)
@click.pass_obj
def adapters(app: AppContext) -> None:
    """List supported types and the measure used for each policy."""
    from lenguard.domain.adapters import iter_adapters

    rows: list[dict[str, Any]] = []
    for type_, adapter in iter_adapters():
        row: dict[str, Any] = {"type": _qualified_name(type_), "category": adapter.category}
        for policy in LengthPolicy:
            chosen = adapter.measure_for(policy)
            row[policy.value] = chosen.value if chosen else None
        rows.append(row)
    columns = ["type", "category", *(p.value for p in LengthPolicy)]
    app.emit_table("Adapters", columns, rows)
