"""All-or-nothing resolution of a request into a :class:`User`.

Each of the five components resolves independently to a value or
``None``.  The join yields a User only when all five are present.  It
does not say which component was absent; run the validators in
:mod:`regcheck.domain.validation` for diagnostics.
"""

from __future__ import annotations

from collections.abc import Mapping

from regcheck.domain.lookups import REGION_TABLE, resolve_gender, resolve_region
from regcheck.domain.models import (
    FirstName,
    LastName,
    PositiveAge,
    RegistrationRequest,
    User,
    make_user,
)
from regcheck.domain.types import Region


def resolve_user(
    request: RegistrationRequest,
    *,
    regions: Mapping[str, Region] = REGION_TABLE,
) -> User | None:
    """Resolve *request* into a User, or ``None`` if any part is absent."""
    first_name = FirstName.parse(request.first_name)
    last_name = LastName.parse(request.last_name)
    age = PositiveAge.parse(request.age)
    gender = resolve_gender(request.sex)
    region = resolve_region(request.country, regions)

    if (
        first_name is None
        or last_name is None
        or age is None
        or gender is None
        or region is None
    ):
        return None
    return make_user(first_name, last_name, age, gender, region)
