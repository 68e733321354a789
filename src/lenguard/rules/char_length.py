"""Scalar-length policy: number of Unicode scalar values.

Text is counted in code points.  Sequences whose elements are already
single characters (``list("héllo")``, ``array("w", ...)``) are counted
by element.  Byte buffers are not text and are rejected.
"""

from __future__ import annotations

from typing import Any

from lenguard.domain.policies import LengthPolicy, Measure
from lenguard.domain.result import CheckResult
from lenguard.rules._base import run_policy

POLICY = LengthPolicy.CHARS


def validate_num_chars(
    value: Any, min_len: int, max_len: int, *, using: Measure | None = None
) -> CheckResult:
    """Check the scalar count of *value* against ``[min_len, max_len]``."""
    return run_policy(POLICY, value, min_len, max_len, using)


def apply(value: Any, bound: tuple[int, int]) -> CheckResult:
    min_len, max_len = bound
    return validate_num_chars(value, min_len, max_len)
