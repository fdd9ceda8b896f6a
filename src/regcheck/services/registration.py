"""RegistrationService — validation and user resolution behind ServiceResult.

Operations:

- ``validate``: run one composition strategy over a request.
- ``register``: validate for diagnostics, then resolve a User.
- ``regions``: list the effective country-to-region table.

The domain layer reports failures as values; this service maps them to
:class:`ServiceError` codes and never raises for bad input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from regcheck.domain.lookups import REGION_TABLE
from regcheck.domain.registration import resolve_user
from regcheck.domain.validation import Strategy, validate
from regcheck.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from regcheck.config.settings import RegSettings
    from regcheck.domain.models import RegistrationRequest
    from regcheck.domain.result import ValidationResult
    from regcheck.domain.types import Region

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "VALIDATION_FAILED"
UNRESOLVED = "UNRESOLVED"


class RegistrationService:
    """Validate registration requests and turn them into users.

    Usage::

        svc = RegistrationService.from_settings(settings)
        result = svc.register(request, strategy=Strategy.ACCUMULATE)
    """

    def __init__(
        self,
        *,
        regions: Mapping[str, Region] = REGION_TABLE,
        default_strategy: Strategy = Strategy.FAIL_FAST,
    ) -> None:
        self._regions = regions
        self._default_strategy = default_strategy

    @classmethod
    def from_settings(cls, settings: RegSettings) -> RegistrationService:
        return cls(
            regions=settings.region_table,
            default_strategy=settings.validation.strategy,
        )

    def validate(
        self,
        request: RegistrationRequest,
        *,
        strategy: Strategy | None = None,
    ) -> ServiceResult:
        """Validate *request*; on success ``data`` echoes the request."""
        chosen = strategy or self._default_strategy
        outcome = validate(request, chosen)
        if not outcome.ok:
            return self._validation_failure("validate", outcome, chosen)

        logger.debug("Request passed %s validation", chosen)
        return ServiceResult(
            ok=True,
            op="validate",
            data={"strategy": str(chosen), "request": request.model_dump()},
        )

    def register(
        self,
        request: RegistrationRequest,
        *,
        strategy: Strategy | None = None,
    ) -> ServiceResult:
        """Validate *request*, then resolve it into a User.

        Validation failures are reported with their messages.  A request
        that validates but cannot be resolved (for example an unmapped
        country) fails with ``UNRESOLVED`` and no per-field cause.  A success
        warns when config re-mapped the built-in region of its country.
        """
        chosen = strategy or self._default_strategy
        outcome = validate(request, chosen)
        if not outcome.ok:
            return self._validation_failure("register", outcome, chosen)

        user = resolve_user(request, regions=self._regions)
        if user is None:
            logger.debug("Valid request did not resolve to a user")
            return ServiceResult(
                ok=False,
                op="register",
                error=ServiceError(
                    code=UNRESOLVED,
                    message="Request could not be resolved to a user",
                ),
            )

        logger.debug("Resolved user in region %s", user.region)
        return ServiceResult(
            ok=True,
            op="register",
            data={"user": user.model_dump(mode="json")},
            warnings=self._override_warnings([request.country]),
        )

    def regions(self) -> ServiceResult:
        """List the effective country-to-region table, sorted by country.

        Built-in entries re-mapped by config are reported as warnings.
        """
        items = [
            {"country": country, "region": str(region)}
            for country, region in sorted(self._regions.items())
        ]
        return ServiceResult(
            ok=True,
            op="regions",
            data={"count": len(items), "items": items},
            warnings=self._override_warnings(sorted(self._regions)),
        )

    def _override_warnings(self, countries: list[str]) -> list[str]:
        """Warn for each built-in country whose region the config re-mapped."""
        warnings: list[str] = []
        for country in countries:
            builtin = REGION_TABLE.get(country)
            effective = self._regions.get(country)
            if builtin is not None and effective is not None and effective != builtin:
                warnings.append(
                    f"Config maps {country} to {effective}, overriding built-in {builtin}"
                )
        return warnings

    @staticmethod
    def _validation_failure(
        op: str,
        outcome: ValidationResult,
        strategy: Strategy,
    ) -> ServiceResult:
        errors = list(outcome.errors)
        logger.debug("Request failed %s validation with %d error(s)", strategy, len(errors))
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=VALIDATION_FAILED,
                message="; ".join(errors),
                detail={"strategy": str(strategy), "errors": errors},
            ),
        )
