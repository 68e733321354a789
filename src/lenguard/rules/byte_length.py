"""Byte-length policy: number of storage units.

For text this is the UTF-8 encoded size, so ``"€"`` counts as 3 and
``"𝄞"`` as 4.  For byte buffers and 1-byte arrays it is the element count.
"""

from __future__ import annotations

from typing import Any

from lenguard.domain.policies import LengthPolicy, Measure
from lenguard.domain.result import CheckResult
from lenguard.rules._base import run_policy

POLICY = LengthPolicy.BYTES


def validate_num_bytes(
    value: Any, min_len: int, max_len: int, *, using: Measure | None = None
) -> CheckResult:
    """Check the storage-unit count of *value* against ``[min_len, max_len]``."""
    return run_policy(POLICY, value, min_len, max_len, using)


def apply(value: Any, bound: tuple[int, int]) -> CheckResult:
    min_len, max_len = bound
    return validate_num_bytes(value, min_len, max_len)
