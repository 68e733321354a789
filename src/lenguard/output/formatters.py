"""Rich/JSON output helpers.

The CLI renders results for humans (Rich styling) or machines (--json).
Every formatter returns a string; printing and exit codes belong to
``AppContext.emit``.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from lenguard.output.console import create_console, get_output

if TYPE_CHECKING:
    from lenguard.domain.result import CheckResult


def _cell(value: Any) -> str:
    return "-" if value is None else escape(str(value))


def format_check(result: CheckResult, *, json_output: bool = False, quiet: bool = False) -> str:
    """Format a CheckResult for display.

    Args:
        result: The check result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        quiet: Human mode only; print just ``OK`` or ``FAIL``.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    console = create_console()
    policy = result.policy or "range"
    if result.ok:
        if quiet:
            console.print("[lg.ok]OK[/]")
        else:
            console.print(f"[lg.ok]OK[/]: [lg.policy]{policy}[/]")
        return get_output(console).rstrip("\n")
    assert result.error is not None
    if quiet:
        console.print("[lg.error]FAIL[/]")
    else:
        console.print(f"[lg.error]FAIL[/]: [lg.policy]{policy}[/] {escape(result.error.message)}")
    return get_output(console).rstrip("\n")


def format_table(
    title: str,
    columns: list[str],
    rows: list[dict[str, Any]],
    *,
    json_output: bool = False,
) -> str:
    """Format *rows* (dicts keyed by *columns*) as a table or a JSON list."""
    if json_output:
        return _json.dumps(rows, indent=2, ensure_ascii=False)
    table = Table(title=title, title_justify="left")
    for column in columns:
        table.add_column(column, style="lg.key" if column == columns[0] else None)
    for row in rows:
        table.add_row(*(_cell(row.get(column)) for column in columns))
    console = create_console()
    console.print(table)
    return get_output(console).rstrip("\n")
