"""Command: check one value against a length bound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from lenguard.commands._base import LenCommand
from lenguard.domain.policies import LengthPolicy

if TYPE_CHECKING:
    from lenguard.commands._context import AppContext


def parse_value(value: str, *, hex_input: bool, chars_list: bool) -> Any:
    """Turn the CLI argument into the value to measure."""
    if hex_input and chars_list:
        msg = "--hex and --chars-list are mutually exclusive"
        raise click.UsageError(msg)
    if hex_input:
        try:
            return bytes.fromhex(value)
        except ValueError as exc:
            msg = f"Invalid hex input: {exc}"
            raise click.BadParameter(msg, param_hint="VALUE") from exc
    if chars_list:
        return list(value)
    return value


@click.command(
    cls=LenCommand,
    examples="""\
  lenguard check "hello" --min 1 --max 10
  lenguard check "𝄞" --policy bytes --min 1 --max 3
  lenguard check "𝄞" --policy chars --min 1 --max 1
  lenguard check --hex "deadbeef" --policy bytes --max 4
  lenguard --json check "abc" --chars-list --policy chars --min 3 --max 3""",
)
@click.argument("value")
@click.option("--min", "min_len", type=click.IntRange(min=0), default=0, help="Minimum length.")
@click.option("--max", "max_len", type=click.IntRange(min=0), required=True, help="Maximum length.")
@click.option(
    "--policy",
    type=click.Choice([p.value for p in LengthPolicy]),
    default=None,
    help="Measurement policy (default from [check] default_policy).",
)
@click.option("--hex", "hex_input", is_flag=True, help="Treat VALUE as hex-encoded bytes.")
@click.option("--chars-list", is_flag=True, help="Treat VALUE as a list of characters.")
@click.pass_obj
def check(
    app: AppContext,
    value: str,
    min_len: int,
    max_len: int,
    policy: str | None,
    hex_input: bool,
    chars_list: bool,
) -> None:
    """Check the length of VALUE against [--min, --max]."""
    from lenguard.domain.errors import UnsupportedTypeError
    from lenguard.rules import validate

    subject = parse_value(value, hex_input=hex_input, chars_list=chars_list)
    chosen = LengthPolicy(policy) if policy else app.settings.check.default_policy
    try:
        result = validate(subject, chosen, min_len, max_len)
    except UnsupportedTypeError as exc:
        raise click.ClickException(str(exc)) from exc
    app.emit(result)
