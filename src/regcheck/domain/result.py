"""ValidationResult — success-or-errors outcome of a validation step.

A success carries the (unchanged) request; a failure carries a non-empty,
ordered tuple of human-readable messages.  Two combinators give the two
composition strategies their semantics:

- ``bind()``: sequential, short-circuits on the first failure.
- ``combine()``: parallel, concatenates failures in call order.

INVARIANT: ``ok`` is True exactly when ``request`` is set and ``errors``
is empty.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator

from regcheck.domain.models import RegistrationRequest


class ValidationResult(BaseModel):
    """Outcome of validating a :class:`RegistrationRequest`.

    Attributes:
        ok: Whether every check passed.
        request: The original request on success, ``None`` on failure.
        errors: Failure messages in evaluation order (empty on success).
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    request: RegistrationRequest | None = None
    errors: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_shape(self) -> Self:
        if self.ok and (self.request is None or self.errors):
            msg = "a successful result carries the request and no errors"
            raise ValueError(msg)
        if not self.ok and (self.request is not None or not self.errors):
            msg = "a failed result carries at least one error and no request"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, request: RegistrationRequest) -> ValidationResult:
        return cls(ok=True, request=request)

    @classmethod
    def failure(cls, *messages: str) -> ValidationResult:
        return cls(ok=False, errors=messages)

    def bind(
        self,
        validator: Callable[[RegistrationRequest], ValidationResult],
    ) -> ValidationResult:
        """Run *validator* on the carried request, or pass this failure through."""
        if not self.ok or self.request is None:
            return self
        return validator(self.request)

    def combine(self, other: ValidationResult) -> ValidationResult:
        """Merge two independent outcomes over the same request.

        Failures win over successes; two failures concatenate their
        errors, left first.  Nothing is deduplicated or reordered.
        """
        if self.ok and other.ok:
            return self
        if self.ok:
            return other
        if other.ok:
            return self
        return ValidationResult.failure(*self.errors, *other.errors)
