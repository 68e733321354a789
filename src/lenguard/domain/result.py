"""LengthError and CheckResult — the outcome of every length check.

INVARIANT: ``ok`` is True iff ``error`` is None.
A failure carries the bound and the measured count; rendering a message
for an end user (with field names etc.) is left to the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from lenguard.domain.errors import LengthViolation

LENGTH_OUT_OF_RANGE = "length_out_of_range"


class LengthError(BaseModel):
    """Structured payload describing a bound violation."""

    model_config = {"frozen": True}

    code: str = LENGTH_OUT_OF_RANGE
    message: str
    min: int
    max: int
    actual: int


class CheckResult(BaseModel):
    """Result of one length check.

    Attributes:
        ok: Whether the measured length fell within the bound.
        policy: Policy the check ran under (``None`` for a bare range check).
        error: Violation details if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    policy: str | None = None
    error: LengthError | None = None

    @model_validator(mode="after")
    def check_error_matches_ok(self) -> CheckResult:
        if self.ok == (self.error is not None):
            msg = "a passing result carries no error; a failing one requires it"
            raise ValueError(msg)
        return self

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, policy: str | None = None) -> CheckResult:
        return cls(ok=True, policy=policy)

    def with_policy(self, policy: str) -> CheckResult:
        """Return a copy of this result tagged with *policy*."""
        return self.model_copy(update={"policy": str(policy)})

    def raise_for_error(self) -> None:
        """Raise :class:`LengthViolation` if the check failed."""
        if self.error is not None:
            raise LengthViolation(self.error)
