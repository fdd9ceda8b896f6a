"""Composition strategies over a validator sequence.

Two interchangeable ways to run the same validators:

- Fail-fast: run in order, stop at the first failure, report only it.
- Accumulate: run every validator, report every failure in order.

Both return the original request unchanged on success.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from functools import reduce
from typing import assert_never

from regcheck.domain.models import RegistrationRequest
from regcheck.domain.result import ValidationResult
from regcheck.domain.rules import DEFAULT_VALIDATORS, Validator


class Strategy(StrEnum):
    """How validator outcomes are composed."""

    FAIL_FAST = "fail-fast"
    ACCUMULATE = "accumulate"


def validate_fail_fast(
    request: RegistrationRequest,
    validators: Sequence[Validator] = DEFAULT_VALIDATORS,
) -> ValidationResult:
    """Chain *validators*; each runs only if every earlier one passed."""
    return reduce(
        lambda result, validator: result.bind(validator),
        validators,
        ValidationResult.success(request),
    )


def validate_all(
    request: RegistrationRequest,
    validators: Sequence[Validator] = DEFAULT_VALIDATORS,
) -> ValidationResult:
    """Run every validator against *request* and collect all failures."""
    outcomes = [validator(request) for validator in validators]
    return reduce(
        lambda left, right: left.combine(right),
        outcomes,
        ValidationResult.success(request),
    )


def validate(
    request: RegistrationRequest,
    strategy: Strategy = Strategy.FAIL_FAST,
    validators: Sequence[Validator] = DEFAULT_VALIDATORS,
) -> ValidationResult:
    """Validate *request* with the chosen *strategy*."""
    match strategy:
        case Strategy.FAIL_FAST:
            return validate_fail_fast(request, validators)
        case Strategy.ACCUMULATE:
            return validate_all(request, validators)
        case _:
            assert_never(strategy)
