"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, regcheck.toml only contains
overrides.  An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from regcheck.domain.types import Region
from regcheck.domain.validation import Strategy


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    strategy: Strategy = Strategy.FAIL_FAST


class LookupConfig(BaseModel):
    """[lookup] section.

    ``regions`` entries are layered over the built-in country table;
    they never remove a built-in entry.
    """

    model_config = {"frozen": True}

    regions: dict[str, Region] = Field(default_factory=dict)

