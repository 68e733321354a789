"""Shared plumbing for the three policy modules."""

from __future__ import annotations

from typing import Any

from lenguard.domain.adapters import measure
from lenguard.domain.policies import LengthPolicy, Measure
from lenguard.domain.range import check_len
from lenguard.domain.result import CheckResult
from lenguard.rules.optional import validate_optional


def _check_bounds(min_len: int, max_len: int) -> None:
    if min_len < 0 or max_len < 0:
        msg = f"Length bounds must be non-negative, got ({min_len}, {max_len})"
        raise ValueError(msg)


def run_policy(
    policy: LengthPolicy,
    value: Any,
    min_len: int,
    max_len: int,
    using: Measure | None = None,
) -> CheckResult:
    """Measure *value* under *policy* and range-check the count."""
    _check_bounds(min_len, max_len)

    def _measured(v: Any, lo: int, hi: int) -> CheckResult:
        return check_len(measure(v, policy, using), lo, hi)

    return validate_optional(_measured, value, min_len, max_len).with_policy(policy)
