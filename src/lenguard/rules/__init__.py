"""Length rules — one module per policy plus a name-based dispatcher."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lenguard.domain.policies import LengthPolicy
from lenguard.domain.result import CheckResult
from lenguard.rules.byte_length import validate_num_bytes
from lenguard.rules.char_length import validate_num_chars
from lenguard.rules.optional import validate_optional
from lenguard.rules.simple_length import validate_length

POLICY_FUNCTIONS: dict[LengthPolicy, Callable[..., CheckResult]] = {
    LengthPolicy.BYTES: validate_num_bytes,
    LengthPolicy.CHARS: validate_num_chars,
    LengthPolicy.SIMPLE: validate_length,
}


def validate(value: Any, policy: LengthPolicy | str, min_len: int, max_len: int) -> CheckResult:
    """Validate *value* under the policy named *policy*.

    Raises:
        ValueError: If *policy* is not a known policy name.
    """
    return POLICY_FUNCTIONS[LengthPolicy(policy)](value, min_len, max_len)


__all__ = [
    "POLICY_FUNCTIONS",
    "validate",
    "validate_length",
    "validate_num_bytes",
    "validate_num_chars",
    "validate_optional",
]
