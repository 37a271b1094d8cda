# -*- coding: utf-8 -*-
"""
Marine unit eligibility service.

Runs a transaction's business rules on one or many marine units and maps
the verdicts to navigation actions. A lookup failure is reported as a
failure, never as an Ineligible verdict.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from app.config import Config
from models.eligibility import Eligible, Ineligible, MarineUnitValidationResult
from models.marine_unit import MarineUnit
from models.navigation_action import ErrorAction, MarineUnitNavigationAction, ShowError
from repositories.marine_unit_repository import MarineUnitRepository
from services.error_mapper import map_exception
from services.exceptions import TRANSIENT_ERRORS
from services.translation_manager import tr
from utils.logger import get_logger

from .business_rules import MarineUnitBusinessRules

logger = get_logger(__name__)


@dataclass(frozen=True)
class EligibilityResolution:
    """Verdict and navigation action for one unit.

    ``result`` is None when the lookups failed; ``action`` then offers a retry.
    """

    result: Optional[MarineUnitValidationResult]
    action: MarineUnitNavigationAction

    @property
    def lookup_failed(self) -> bool:
        return self.result is None


@dataclass(frozen=True)
class EligibilityReport:
    """Verdicts keyed by unit id, and user messages of units whose lookups failed."""

    results: Dict[str, MarineUnitValidationResult] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)

    def result_for(self, unit: MarineUnit) -> Optional[MarineUnitValidationResult]:
        return self.results.get(unit.id)


class MarineUnitEligibilityService:
    """Applies MarineUnitBusinessRules to marine units."""

    def __init__(self, marine_unit_repository: MarineUnitRepository, max_workers: int = None):
        self.marine_unit_repository = marine_unit_repository
        self.max_workers = max_workers or Config.ELIGIBILITY_MAX_WORKERS

    def validate(self, unit: MarineUnit, user_id: str, rules: MarineUnitBusinessRules) -> MarineUnitValidationResult:
        """
        Run the rules on one unit.

        Raises:
            ApiException, NetworkException: A lookup failed
        """
        result = rules.validate_unit(unit, user_id)
        if isinstance(result, Ineligible):
            logger.info(f"Unit {unit.id} ineligible ({type(result).__name__}) under {type(rules).__name__}")
        else:
            logger.debug(f"Unit {unit.id} eligible under {type(rules).__name__}")
        return result

    def validate_and_resolve_action(
        self, unit: MarineUnit, user_id: str, rules: MarineUnitBusinessRules
    ) -> EligibilityResolution:
        """Run the rules on one unit and map the verdict to a navigation action."""
        try:
            result = self.validate(unit, user_id, rules)
        except TRANSIENT_ERRORS as e:
            logger.error(f"Eligibility lookup failed for unit {unit.id}: {e}")
            return EligibilityResolution(result=None, action=self._lookup_failed_action(unit, e))

        return EligibilityResolution(result=result, action=rules.get_navigation_action(result))

    @staticmethod
    def _lookup_failed_action(unit: MarineUnit, error: Exception) -> ShowError:
        message = map_exception(error, context=f"eligibility of unit {unit.id}")
        retry = ShowError(title="", message="")
        return ShowError(
            title=tr("eligibility.error.lookup_failed.title"),
            message=message,
            actions=[ErrorAction(label=tr("button.retry"), action=retry)],
        )

    def resolve_for_many(
        self, units: Sequence[MarineUnit], user_id: str, rules: MarineUnitBusinessRules
    ) -> EligibilityReport:
        """
        Evaluate several units concurrently.

        Results are keyed by unit id, so completion order does not matter.
        """
        results: Dict[str, MarineUnitValidationResult] = {}
        failures: Dict[str, str] = {}
        if not units:
            return EligibilityReport(results, failures)

        workers = max(1, min(self.max_workers, len(units)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="eligibility") as executor:
            futures = {unit.id: executor.submit(self.validate, unit, user_id, rules) for unit in units}
            for unit_id, future in futures.items():
                try:
                    results[unit_id] = future.result()
                except TRANSIENT_ERRORS as e:
                    logger.error(f"Eligibility lookup failed for unit {unit_id}: {e}")
                    failures[unit_id] = map_exception(e, context=f"eligibility of unit {unit_id}")

        logger.info(
            f"Resolved eligibility of {len(units)} units: "
            f"{len(results)} answered, {len(failures)} failed"
        )
        return EligibilityReport(results, failures)

    @staticmethod
    def filter_eligible(units: Sequence[MarineUnit], report: EligibilityReport) -> List[MarineUnit]:
        return [unit for unit in units if isinstance(report.result_for(unit), Eligible)]

    @staticmethod
    def group_by_eligibility(
        units: Sequence[MarineUnit], report: EligibilityReport
    ) -> Tuple[List[MarineUnit], List[Tuple[MarineUnit, str]]]:
        """
        Split units into eligible ones and ineligible ones with their reason.

        Units whose lookups failed are in neither group.
        """
        eligible: List[MarineUnit] = []
        ineligible: List[Tuple[MarineUnit, str]] = []
        for unit in units:
            result = report.result_for(unit)
            if isinstance(result, Eligible):
                eligible.append(unit)
            elif isinstance(result, Ineligible):
                ineligible.append((unit, result.reason))
        return eligible, ineligible

    def get_units_with_results(
        self, user_id: str, rules: MarineUnitBusinessRules
    ) -> Tuple[List[MarineUnit], EligibilityReport]:
        """Fetch the user's units and evaluate all of them."""
        units = self.marine_unit_repository.get_user_marine_units(user_id)
        return units, self.resolve_for_many(units, user_id, rules)
