"""Lookup resolvers — raw strings to closed domain enums.

Resolvers report absence (``None``) rather than errors.  Absence means
"unsupported or unknown", never a silent fallback to a default member.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from regcheck.domain.types import Gender, Region

# Static configuration data, not derived logic.  Keys match exactly.
REGION_TABLE: Mapping[str, Region] = MappingProxyType(
    {
        "Belgium": Region.EUROPE,
        "Germany": Region.EUROPE,
        "USA": Region.NORTH_AMERICA,
        "Thailand": Region.OTHER,
    }
)

_GENDER_BY_CODE: Mapping[str, Gender] = MappingProxyType({g.value: g for g in Gender})


def resolve_gender(code: str) -> Gender | None:
    """Map a raw sex code to a :class:`Gender`.

    Examples:
        >>> resolve_gender("F")
        <Gender.FEMALE: 'F'>
        >>> resolve_gender("f") is None
        True
    """
    return _GENDER_BY_CODE.get(code)


def resolve_region(
    country: str,
    table: Mapping[str, Region] = REGION_TABLE,
) -> Region | None:
    """Map a country name to its :class:`Region`, or ``None`` if unmapped."""
    return table.get(country)


def merge_region_table(overrides: Mapping[str, Region]) -> Mapping[str, Region]:
    """Layer *overrides* over the built-in table and return a read-only copy."""
    return MappingProxyType({**REGION_TABLE, **overrides})
