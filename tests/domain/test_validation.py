"""Tests for the fail-fast and accumulating composition strategies."""

from __future__ import annotations

import pytest

from regcheck.domain.models import RegistrationRequest
from regcheck.domain.result import ValidationResult
from regcheck.domain.rules import MISSING_FIELDS_MESSAGE
from regcheck.domain.validation import (
    Strategy,
    validate,
    validate_all,
    validate_fail_fast,
)

# (overrides, expected accumulated errors); fail-fast reports only the first
INVALID_CASES = [
    ({"age": 13}, ["Invalid age of 13"]),
    ({"sex": "G"}, ["Invalid sex of G"]),
    ({"first_name": ""}, [MISSING_FIELDS_MESSAGE]),
    ({"age": 13, "sex": "G"}, ["Invalid age of 13", "Invalid sex of G"]),
    ({"country": "", "sex": "G"}, [MISSING_FIELDS_MESSAGE, "Invalid sex of G"]),
    ({"age": 0}, [MISSING_FIELDS_MESSAGE, "Invalid age of 0"]),
    (
        {"last_name": "", "age": 200, "sex": "Q"},
        [MISSING_FIELDS_MESSAGE, "Invalid age of 200", "Invalid sex of Q"],
    ),
]


class TestValidRequests:
    @pytest.mark.parametrize("sex", ["M", "F", "X"])
    @pytest.mark.parametrize("age", [18, 64, 149])
    def test_both_strategies_succeed(
        self, valid_request: RegistrationRequest, age: int, sex: str
    ) -> None:
        request = valid_request.model_copy(update={"age": age, "sex": sex})
        fast = validate_fail_fast(request)
        full = validate_all(request)
        assert fast.ok is True
        assert full.ok is True
        assert fast.request == request
        assert full.request == request

    def test_unmapped_country_still_validates(self) -> None:
        request = RegistrationRequest(
            first_name="Jane", last_name="Doe", age=37, sex="M", country="Canada"
        )
        assert validate_fail_fast(request).ok is True
        assert validate_all(request).ok is True


class TestInvalidRequests:
    @pytest.mark.parametrize("overrides,expected", INVALID_CASES)
    def test_accumulate_reports_every_check_in_order(
        self,
        valid_request: RegistrationRequest,
        overrides: dict[str, object],
        expected: list[str],
    ) -> None:
        request = valid_request.model_copy(update=overrides)
        result = validate_all(request)
        assert result.ok is False
        assert list(result.errors) == expected

    @pytest.mark.parametrize("overrides,expected", INVALID_CASES)
    def test_fail_fast_reports_first_check_only(
        self,
        valid_request: RegistrationRequest,
        overrides: dict[str, object],
        expected: list[str],
    ) -> None:
        request = valid_request.model_copy(update=overrides)
        result = validate_fail_fast(request)
        assert result.ok is False
        assert result.errors == (expected[0],)

    def test_scenario_b(self) -> None:
        request = RegistrationRequest(
            first_name="John", last_name="Doe", age=13, sex="G", country="Thailand"
        )
        assert list(validate_all(request).errors) == ["Invalid age of 13", "Invalid sex of G"]
        assert validate_fail_fast(request).errors == ("Invalid age of 13",)


class TestShortCircuit:
    def test_fail_fast_stops_after_first_failure(
        self, valid_request: RegistrationRequest
    ) -> None:
        calls: list[str] = []

        def failing(request: RegistrationRequest) -> ValidationResult:
            calls.append("failing")
            return ValidationResult.failure("nope")

        def later(request: RegistrationRequest) -> ValidationResult:
            calls.append("later")
            return ValidationResult.success(request)

        validate_fail_fast(valid_request, [failing, later])
        assert calls == ["failing"]

    def test_accumulate_runs_everything(self, valid_request: RegistrationRequest) -> None:
        calls: list[str] = []

        def failing(request: RegistrationRequest) -> ValidationResult:
            calls.append("failing")
            return ValidationResult.failure("nope")

        def later(request: RegistrationRequest) -> ValidationResult:
            calls.append("later")
            return ValidationResult.success(request)

        validate_all(valid_request, [failing, later])
        assert calls == ["failing", "later"]

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_empty_validator_set_succeeds(
        self, valid_request: RegistrationRequest, strategy: Strategy
    ) -> None:
        assert validate(valid_request, strategy, validators=()).ok is True


class TestDispatch:
    def test_default_is_fail_fast(self) -> None:
        request = RegistrationRequest(age=13, sex="G")
        assert validate(request).errors == (MISSING_FIELDS_MESSAGE,)

    def test_accumulate(self) -> None:
        request = RegistrationRequest(age=13, sex="G")
        assert validate(request, Strategy.ACCUMULATE).errors == (
            MISSING_FIELDS_MESSAGE,
            "Invalid age of 13",
            "Invalid sex of G",
        )

    def test_strategy_values(self) -> None:
        assert {s.value for s in Strategy} == {"fail-fast", "accumulate"}

    def test_unknown_strategy_raises(self, valid_request: RegistrationRequest) -> None:
        with pytest.raises(AssertionError):
            validate(valid_request, "lenient")  # type: ignore[arg-type]
