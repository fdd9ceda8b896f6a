"""Field validators — one concern each.

Each validator maps a :class:`RegistrationRequest` to a
:class:`ValidationResult` carrying either the unchanged request or a
single message.  Validators are independent; order only matters to the
fail-fast strategy in :mod:`regcheck.domain.validation`.
"""

from __future__ import annotations

from collections.abc import Callable

from regcheck.domain.models import RegistrationRequest
from regcheck.domain.result import ValidationResult
from regcheck.domain.types import Gender

type Validator = Callable[[RegistrationRequest], ValidationResult]

# Adult, plausible-human band: MIN_AGE <= age < MAX_AGE
MIN_AGE = 18
MAX_AGE = 150

MISSING_FIELDS_MESSAGE = "Please fill in all required fields"

GENDER_CODES: frozenset[str] = frozenset(g.value for g in Gender)


def fields_not_empty(request: RegistrationRequest) -> ValidationResult:
    """Coarse completeness gate over all five fields.

    Empty text and an age of ``0`` count as unset.  The message does not
    name the missing field.
    """
    if (
        request.first_name
        and request.last_name
        and request.age
        and request.sex
        and request.country
    ):
        return ValidationResult.success(request)
    return ValidationResult.failure(MISSING_FIELDS_MESSAGE)


def validate_age(request: RegistrationRequest) -> ValidationResult:
    """Require ``MIN_AGE <= age < MAX_AGE``."""
    if MIN_AGE <= request.age < MAX_AGE:
        return ValidationResult.success(request)
    return ValidationResult.failure(f"Invalid age of {request.age}")


def validate_gender(request: RegistrationRequest) -> ValidationResult:
    """Require one of the recognized sex codes."""
    if request.sex in GENDER_CODES:
        return ValidationResult.success(request)
    return ValidationResult.failure(f"Invalid sex of {request.sex}")


DEFAULT_VALIDATORS: tuple[Validator, ...] = (
    fields_not_empty,
    validate_age,
    validate_gender,
)
