"""Exceptions raised by the length rules.

A bound violation is *not* an exception: it is returned as a failed
:class:`~lenguard.domain.result.CheckResult`.  Exceptions are reserved for
misuse (unsupported types, negative bounds) and for callers that opt in via
``CheckResult.raise_for_error()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lenguard.domain.result import LengthError


class LenguardError(Exception):
    """Base exception for lenguard."""


class UnsupportedTypeError(LenguardError, TypeError):
    """Raised when a value's type has no measurement for the requested policy."""

    def __init__(self, policy: str, type_name: str, reason: str | None = None) -> None:
        self.policy = str(policy)
        self.type_name = type_name
        msg = f"{type_name!r} does not support the {self.policy!r} length policy"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class LengthViolation(LenguardError, ValueError):
    """Raised by ``CheckResult.raise_for_error()`` for a failed check."""

    def __init__(self, error: LengthError) -> None:
        self.error = error
        super().__init__(error.message)
