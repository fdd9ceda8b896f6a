"""Registration input, constrained value types, and the User entity.

Smart-constructor discipline: every constrained type exposes a
``parse()`` classmethod that returns an instance or ``None`` and never
raises.  Direct construction still runs pydantic validation, so an
invalid instance cannot be held at all.

INVARIANT: A ``User`` exists only if each of its five fields already
satisfied its own constraint.  There is no partially-valid User.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from regcheck.domain.types import Gender, Region

# ---------------------------------------------------------------------------
# Untrusted input
# ---------------------------------------------------------------------------


class RegistrationRequest(BaseModel):
    """Raw registration submission.

    Carries no invariants: fields may be empty, zero, negative, or
    nonsensical.  Empty string and ``0`` stand for "unset".
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    age: int = 0
    sex: str = ""
    country: str = ""


# ---------------------------------------------------------------------------
# Constrained value types
# ---------------------------------------------------------------------------


class _PersonName(BaseModel):
    """Non-empty text.  Subclassed per role, never used directly."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: str = Field(min_length=1)

    @classmethod
    def parse(cls, value: str) -> Self | None:
        """Wrap *value*, or return ``None`` if it is empty."""
        if not isinstance(value, str) or not value:
            return None
        return cls(value=value)

    @model_serializer
    def ser_model(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class FirstName(_PersonName):
    """A person's given name.  Not substitutable for :class:`LastName`."""


class LastName(_PersonName):
    """A person's family name.  Not substitutable for :class:`FirstName`."""


class PositiveAge(BaseModel):
    """An age of at least one year.

    This is a structural floor only; the stricter adult band lives in
    :func:`regcheck.domain.rules.validate_age` and serves a different caller.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    value: int = Field(ge=1)

    @classmethod
    def parse(cls, value: int) -> Self | None:
        """Wrap *value*, or return ``None`` if it is not a positive integer."""
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return None
        return cls(value=value)

    @model_serializer
    def ser_model(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------


class User(BaseModel):
    """A fully validated registered user."""

    model_config = ConfigDict(frozen=True, strict=True)

    first_name: FirstName
    last_name: LastName
    age: PositiveAge
    gender: Gender
    region: Region


def make_user(
    first_name: FirstName,
    last_name: LastName,
    age: PositiveAge,
    gender: Gender,
    region: Region,
) -> User:
    """Assemble a User from already-validated parts.

    Performs no validation of its own; every argument is proof of validity.
    """
    return User(
        first_name=first_name,
        last_name=last_name,
        age=age,
        gender=gender,
        region=region,
    )
