# -*- coding: utf-8 -*-
"""
Marine unit business rules.

Each transaction type plugs in its own strategy. A strategy decides whether a
selected marine unit may be used (``validate_unit``) and translates the
verdict into a navigation action for the wizard (``get_navigation_action``).

Lookups go through the repositories. A lookup that fails raises
ApiException / NetworkException and is never turned into a verdict here.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.eligibility import (
    Eligible,
    Ineligible,
    MarineUnitValidationResult,
    NotOwned,
    SuspendedOrCancelled,
    TemporaryRegistration,
)
from models.marine_unit import InspectionStatus, MarineUnit
from models.navigation_action import (
    ComplianceIssue,
    IssueSeverity,
    MarineUnitNavigationAction,
    ShowComplianceDetailScreen,
)
from repositories.marine_unit_repository import MarineUnitRepository
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

STATUS_SUSPENDED = "SUSPENDED"
STATUS_CANCELLED = "CANCELLED"
REGISTRATION_TEMPORARY = "TEMPORARY"


class MarineUnitBusinessRules(ABC):
    """Strategy interface for marine unit eligibility."""

    @abstractmethod
    def validate_unit(self, unit: MarineUnit, user_id: str) -> MarineUnitValidationResult:
        """Run the ordered checks; the first failing check decides."""

    @abstractmethod
    def get_navigation_action(self, result: MarineUnitValidationResult) -> MarineUnitNavigationAction:
        """Translate a verdict into what the wizard should do next."""

    def get_error_message(self, result: MarineUnitValidationResult) -> str:
        if isinstance(result, Eligible):
            return ""
        return result.reason

    def allow_multiple_selection(self) -> bool:
        return False

    def get_step_title(self) -> str:
        return tr("eligibility.step.title")

    def get_step_description(self) -> str:
        return tr("eligibility.step.description")


class BaseMarineUnitRules(MarineUnitBusinessRules):
    """
    Checks shared by the concrete strategies.

    Each ``check_*`` method returns an Ineligible verdict, or None when the
    check passes.
    """

    def __init__(self, marine_unit_repository: MarineUnitRepository):
        self.marine_unit_repository = marine_unit_repository

    def check_ownership(self, unit: MarineUnit, user_id: str) -> Optional[Ineligible]:
        if not self.marine_unit_repository.verify_ownership(unit.id, user_id):
            logger.debug(f"Unit {unit.id} is not owned by user {user_id}")
            return NotOwned(unit=unit)
        return None

    def check_registration_status(self, unit: MarineUnit) -> Optional[Ineligible]:
        status = self.marine_unit_repository.get_unit_status(unit.id)
        if status == STATUS_SUSPENDED:
            return SuspendedOrCancelled(unit=unit, status=tr("eligibility.status.suspended"))
        if status == STATUS_CANCELLED:
            return SuspendedOrCancelled(unit=unit, status=tr("eligibility.status.cancelled"))
        return None

    def check_permanent_registration(self, unit: MarineUnit) -> Optional[Ineligible]:
        registration_type = self.marine_unit_repository.get_registration_type(unit.id)
        if registration_type == REGISTRATION_TEMPORARY:
            return TemporaryRegistration(unit=unit)
        return None

    def check_inspection_status(self, unit: MarineUnit) -> InspectionStatus:
        return self.marine_unit_repository.get_inspection_status(unit.id)


def suggestion_details(result: Ineligible) -> dict:
    """Compliance issue details holding only the suggested solution."""
    if not result.suggestion:
        return {}
    return {tr("compliance.suggested_solution"): result.suggestion}


def full_reason(result: Ineligible) -> str:
    """Reason followed by the suggestion, separated by a blank line."""
    if result.suggestion:
        return f"{result.reason}\n\n{result.suggestion}"
    return result.reason


def generic_rejection(result: Ineligible) -> ShowComplianceDetailScreen:
    """Compliance screen used for verdicts a strategy does not special-case."""
    return ShowComplianceDetailScreen(
        marine_unit=result.unit,
        compliance_issues=[
            ComplianceIssue(
                category=tr("compliance.category.rejection"),
                title=tr("compliance.issue.ineligible"),
                description=result.reason,
                severity=IssueSeverity.BLOCKING,
                details=suggestion_details(result),
            )
        ],
        rejection_reason=full_reason(result),
        rejection_title=tr("compliance.rejected.title"),
    )
