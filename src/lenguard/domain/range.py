"""Inclusive range check shared by every length policy."""

from __future__ import annotations

import logging

from lenguard.domain.result import CheckResult, LengthError

logger = logging.getLogger(__name__)


def check_len(count: int, min_len: int, max_len: int) -> CheckResult:
    """Check that *count* lies within ``[min_len, max_len]``.

    Both ends are inclusive.  No ordering is enforced between the bounds:
    when ``min_len > max_len`` nothing can satisfy the range and every
    count fails.
    """
    if min_len <= count <= max_len:
        return CheckResult(ok=True)
    logger.debug("Length %d outside [%d, %d]", count, min_len, max_len)
    error = LengthError(
        message=f"expected length between {min_len} and {max_len}, got {count}",
        min=min_len,
        max=max_len,
        actual=count,
    )
    return CheckResult(ok=False, error=error)
