"""Closed enumerations for the registration domain.

Both enums are closed: raw codes outside these members are
unrepresentable and resolve to ``None`` in :mod:`regcheck.domain.lookups`.
"""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    """Recognized sex codes, valued by their raw submission code."""

    MALE = "M"
    FEMALE = "F"
    OTHER = "X"


class Region(StrEnum):
    """Geographic region a supported country belongs to."""

    EUROPE = "europe"
    NORTH_AMERICA = "north_america"
    OTHER = "other"
