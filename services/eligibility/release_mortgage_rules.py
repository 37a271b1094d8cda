# -*- coding: utf-8 -*-
"""Business rules for the Release Mortgage transaction."""

from models.eligibility import (
    CustomError,
    Eligible,
    MarineUnitValidationResult,
    NotMortgaged,
)
from models.marine_unit import MarineUnit
from models.navigation_action import (
    ErrorAction,
    MarineUnitNavigationAction,
    ProceedToNextStep,
    RedirectToTransaction,
    ShowError,
)
from models.transaction_type import TransactionType
from repositories.marine_unit_repository import MarineUnitRepository
from repositories.mortgage_repository import MortgageRepository
from services.translation_manager import tr

from .business_rules import BaseMarineUnitRules, full_reason


class ReleaseMortgageRules(BaseMarineUnitRules):
    """
    A unit can have its mortgage released when it is owned by the applicant,
    active, and mortgaged with an approved bank.
    """

    def __init__(self, marine_unit_repository: MarineUnitRepository, mortgage_repository: MortgageRepository):
        super().__init__(marine_unit_repository)
        self.mortgage_repository = mortgage_repository

    def validate_unit(self, unit: MarineUnit, user_id: str) -> MarineUnitValidationResult:
        verdict = self.check_ownership(unit, user_id) or self.check_registration_status(unit)
        if verdict is not None:
            return verdict

        mortgage = self.mortgage_repository.get_mortgage_status(unit.id)
        if not mortgage.is_mortgaged:
            return NotMortgaged(unit=unit)

        if not mortgage.is_approved_bank:
            return CustomError(
                unit=unit,
                custom_reason=tr("eligibility.unapproved_bank.reason"),
                custom_suggestion=tr("eligibility.unapproved_bank.suggestion"),
            )

        return Eligible(
            unit=unit,
            additional_data={
                "mortgageId": mortgage.mortgage_id or "",
                "bankName": mortgage.bank_name or "",
                "mortgageStartDate": mortgage.start_date or "",
                "mortgageEndDate": mortgage.end_date or "",
                "mortgageAmount": mortgage.mortgage_amount or "",
            },
        )

    def get_navigation_action(self, result: MarineUnitValidationResult) -> MarineUnitNavigationAction:
        if isinstance(result, Eligible):
            return ProceedToNextStep(selected_unit=result.unit, additional_data=dict(result.additional_data))

        if isinstance(result, NotMortgaged):
            # Offer the mortgage certificate transaction instead
            return ShowError(
                title=tr("eligibility.error.not_mortgaged.title"),
                message=f"{result.reason}\n\n{tr('eligibility.error.not_mortgaged.message')}",
                actions=[
                    ErrorAction(
                        label=tr("eligibility.action.go_to_mortgage"),
                        action=RedirectToTransaction(
                            transaction_type=TransactionType.MORTGAGE_CERTIFICATE,
                            reason="Unit not mortgaged",
                            prefilled_data={"selectedMarineUnitId": result.unit.id},
                        ),
                    ),
                    ErrorAction(
                        label=tr("button.choose_another_unit"),
                        action=ShowError(title="", message=""),
                    ),
                ],
            )

        return ShowError(
            title=tr("eligibility.error.ineligible.title"),
            message=full_reason(result),
        )

    def get_step_title(self) -> str:
        return tr("eligibility.release.step.title")

    def get_step_description(self) -> str:
        return tr("eligibility.release.step.description")
