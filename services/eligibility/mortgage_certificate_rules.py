# -*- coding: utf-8 -*-
"""
Business rules for the Mortgage Certificate transaction.

A unit can be mortgaged when it is owned by the applicant, active,
permanently registered, free of any mortgage and has no violations or
detentions.
"""

from models.eligibility import (
    AlreadyMortgaged,
    Eligible,
    HasDetentions,
    HasViolations,
    Ineligible,
    MarineUnitValidationResult,
    NotOwned,
    SuspendedOrCancelled,
    TemporaryRegistration,
)
from models.marine_unit import MarineUnit
from models.navigation_action import (
    ComplianceIssue,
    IssueSeverity,
    MarineUnitNavigationAction,
    ProceedToNextStep,
    ShowComplianceDetailScreen,
)
from repositories.marine_unit_repository import MarineUnitRepository
from repositories.mortgage_repository import MortgageRepository
from services.translation_manager import tr
from utils.logger import get_logger

from .business_rules import BaseMarineUnitRules, generic_rejection

logger = get_logger(__name__)


class MortgageCertificateRules(BaseMarineUnitRules):
    """Eligibility for issuing a mortgage certificate."""

    def __init__(self, marine_unit_repository: MarineUnitRepository, mortgage_repository: MortgageRepository):
        super().__init__(marine_unit_repository)
        self.mortgage_repository = mortgage_repository

    def validate_unit(self, unit: MarineUnit, user_id: str) -> MarineUnitValidationResult:
        # Ordered: the first failing check decides
        verdict = (
            self.check_ownership(unit, user_id)
            or self.check_registration_status(unit)
            or self.check_permanent_registration(unit)
            or self._check_not_mortgaged(unit)
        )
        if verdict is not None:
            return verdict

        if unit.violations_count > 0:
            return HasViolations(unit=unit, violations_count=unit.violations_count)

        if unit.detentions_count > 0:
            return HasDetentions(unit=unit, detentions_count=unit.detentions_count)

        return Eligible(
            unit=unit,
            additional_data={
                "registrationType": "PERMANENT",
                "mortgageStatus": "FREE",
                "canProceed": True,
            },
        )

    def _check_not_mortgaged(self, unit: MarineUnit):
        status = self.mortgage_repository.get_mortgage_status(unit.id)
        if not status.is_mortgaged:
            return None
        logger.debug(f"Unit {unit.id} already mortgaged to {status.bank_name}")
        return AlreadyMortgaged(
            unit=unit,
            bank_name=status.bank_name or tr("common.unknown"),
            mortgage_end_date=status.end_date or tr("common.unspecified"),
        )

    def get_navigation_action(self, result: MarineUnitValidationResult) -> MarineUnitNavigationAction:
        if isinstance(result, Eligible):
            return ProceedToNextStep(selected_unit=result.unit, additional_data=dict(result.additional_data))

        if isinstance(result, AlreadyMortgaged):
            return self._compliance_screen(
                result,
                category=tr("compliance.category.mortgage"),
                title=tr("compliance.issue.mortgaged"),
                description=tr("compliance.issue.mortgaged.description", bank=result.bank_name),
                details={
                    tr("compliance.bank"): result.bank_name,
                    tr("compliance.mortgage_end_date"): result.mortgage_end_date,
                    tr("compliance.suggested_solution"): result.suggestion,
                },
                rejection_key="compliance.mortgage",
            )

        if isinstance(result, NotOwned):
            return self._compliance_screen(
                result,
                category=tr("compliance.category.ownership"),
                title=tr("compliance.issue.not_owned"),
                description=tr("compliance.issue.not_owned.description"),
                details={
                    tr("compliance.current_owner"): result.actual_owner or tr("common.unknown"),
                    tr("compliance.suggested_solution"): result.suggestion,
                },
                rejection_key="compliance.ownership",
            )

        if isinstance(result, TemporaryRegistration):
            return self._compliance_screen(
                result,
                category=tr("compliance.category.registration_type"),
                title=tr("compliance.issue.temporary"),
                description=tr("compliance.issue.temporary.description"),
                details={
                    tr("compliance.registration_type"): tr("compliance.value.temporary"),
                    tr("compliance.required"): tr("compliance.value.permanent"),
                    tr("compliance.suggested_solution"): result.suggestion,
                },
                rejection_key="compliance.temporary",
            )

        if isinstance(result, SuspendedOrCancelled):
            return self._compliance_screen(
                result,
                category=tr("compliance.category.registration_status"),
                title=tr("compliance.issue.status", status=result.status),
                description=tr("compliance.issue.status.description", status=result.status),
                details={
                    tr("compliance.status"): result.status,
                    tr("compliance.suggested_solution"): result.suggestion,
                },
                rejection_key="compliance.status",
                status=result.status,
            )

        if isinstance(result, HasViolations):
            return self._compliance_screen(
                result,
                category=tr("compliance.category.violations"),
                title=tr("compliance.issue.violations"),
                description=tr("compliance.issue.violations.description", count=result.violations_count),
                details={
                    tr("compliance.violations_count"): str(result.violations_count),
                    tr("compliance.suggested_solution"): result.suggestion,
                },
                rejection_key="compliance.violations",
            )

        if isinstance(result, HasDetentions):
            return self._compliance_screen(
                result,
                category=tr("compliance.category.detentions"),
                title=tr("compliance.issue.detentions"),
                description=tr("compliance.issue.detentions.description", count=result.detentions_count),
                details={
                    tr("compliance.detentions_count"): str(result.detentions_count),
                    tr("compliance.suggested_solution"): result.suggestion,
                },
                rejection_key="compliance.detentions",
            )

        return generic_rejection(result)

    @staticmethod
    def _compliance_screen(result: Ineligible, category: str, title: str, description: str,
                           details: dict, rejection_key: str, **params) -> ShowComplianceDetailScreen:
        return ShowComplianceDetailScreen(
            marine_unit=result.unit,
            compliance_issues=[
                ComplianceIssue(
                    category=category,
                    title=title,
                    description=description,
                    severity=IssueSeverity.BLOCKING,
                    details={label: value for label, value in details.items() if value},
                )
            ],
            rejection_reason=tr(f"{rejection_key}.rejection", **params),
            rejection_title=tr(f"{rejection_key}.rejection.title", **params),
        )

    def get_step_title(self) -> str:
        return tr("eligibility.mortgage.step.title")

    def get_step_description(self) -> str:
        return tr("eligibility.mortgage.step.description")
