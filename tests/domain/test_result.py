"""Tests for CheckResult and LengthError."""

import json

import pytest
from pydantic import ValidationError

from lenguard.domain.errors import LengthViolation
from lenguard.domain.result import CheckResult, LengthError


def _error() -> LengthError:
    return LengthError(message="expected length between 1 and 2, got 3", min=1, max=2, actual=3)


class TestCheckResult:
    def test_success(self) -> None:
        result = CheckResult.success("bytes")
        assert result.ok is True
        assert result.policy == "bytes"
        assert result.error is None
        assert bool(result) is True

    def test_failure_is_falsy(self) -> None:
        result = CheckResult(ok=False, error=_error())
        assert bool(result) is False

    def test_ok_with_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CheckResult(ok=True, error=_error())

    def test_failure_without_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CheckResult(ok=False)

    def test_with_policy(self) -> None:
        tagged = CheckResult(ok=False, error=_error()).with_policy("chars")
        assert tagged.policy == "chars"
        assert tagged.error == _error()

    def test_raise_for_error(self) -> None:
        result = CheckResult(ok=False, error=_error())
        with pytest.raises(LengthViolation) as exc_info:
            result.raise_for_error()
        assert exc_info.value.error.actual == 3
        assert "got 3" in str(exc_info.value)

    def test_raise_for_error_noop_on_success(self) -> None:
        CheckResult.success().raise_for_error()

    def test_length_violation_is_value_error(self) -> None:
        assert issubclass(LengthViolation, ValueError)

    def test_json_serialization(self) -> None:
        result = CheckResult(ok=False, policy="simple", error=_error())
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["policy"] == "simple"
        assert parsed["error"]["code"] == "length_out_of_range"
        assert parsed["error"]["actual"] == 3

    def test_frozen(self) -> None:
        result = CheckResult.success()
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
