"""Optional values: absence passes every policy.

``None`` is exempt rather than zero-length, so it passes even a bound of
``(1, 1)``.  A present value is handed to the policy untouched; an
unsupported present value still raises.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lenguard.domain.result import CheckResult

T = TypeVar("T")

PolicyFn = Callable[[Any, int, int], CheckResult]


def validate_optional(
    policy_fn: PolicyFn,
    maybe_value: T | None,
    min_len: int,
    max_len: int,
) -> CheckResult:
    """Run *policy_fn* on *maybe_value* unless it is ``None``."""
    if maybe_value is None:
        return CheckResult(ok=True)
    return policy_fn(maybe_value, min_len, max_len)
