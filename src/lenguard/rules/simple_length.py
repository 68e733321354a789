"""Simple-length policy: the type's own notion of length.

The meaning depends on the type.  Text uses its byte length (no
decoding); collections use their element count.
"""

from __future__ import annotations

from typing import Any

from lenguard.domain.policies import LengthPolicy, Measure
from lenguard.domain.result import CheckResult
from lenguard.rules._base import run_policy

POLICY = LengthPolicy.SIMPLE


def validate_length(
    value: Any, min_len: int, max_len: int, *, using: Measure | None = None
) -> CheckResult:
    return run_policy(POLICY, value, min_len, max_len, using)


def apply(value: Any, bound: tuple[int, int]) -> CheckResult:
    min_len, max_len = bound
    return validate_length(value, min_len, max_len)
