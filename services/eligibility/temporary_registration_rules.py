# -*- coding: utf-8 -*-
"""
Business rules for the Temporary Registration Certificate transaction.

Only the inspection status matters:
1. inspected and VALID -> proceed
2. not inspected and PENDING -> request under processing
3. anything else -> request declined
"""

from app.config import Config
from models.eligibility import (
    CustomError,
    Eligible,
    MarineUnitValidationResult,
)
from models.marine_unit import MarineUnit
from models.navigation_action import (
    ComplianceIssue,
    IssueSeverity,
    MarineUnitNavigationAction,
    ProceedToNextStep,
    ShowComplianceDetailScreen,
)
from services.translation_manager import tr
from utils.logger import get_logger

from .business_rules import BaseMarineUnitRules, full_reason, generic_rejection, suggestion_details

logger = get_logger(__name__)

INSPECTION_VALID = "VALID"
INSPECTION_PENDING = "PENDING"


class PendingInspection(CustomError):
    """Inspection requested but not verified yet."""


class TemporaryRegistrationRules(BaseMarineUnitRules):

    def validate_unit(self, unit: MarineUnit, user_id: str) -> MarineUnitValidationResult:
        # Units added during this session are not known to the backend yet
        if unit.id.startswith(Config.NEW_UNIT_ID_PREFIX):
            return CustomError(
                unit=unit,
                custom_reason=tr("eligibility.not_inspected.reason"),
                custom_suggestion=tr("eligibility.inspection_required.suggestion"),
            )

        inspection = self.check_inspection_status(unit)

        if inspection.is_inspected and inspection.status == INSPECTION_VALID:
            return Eligible(
                unit=unit,
                additional_data={
                    "isInspected": True,
                    "inspectionDate": inspection.inspection_date or "",
                    "inspectionType": inspection.inspection_type or "",
                    "certificateNumber": inspection.certificate_number or "",
                    "inspectionStatus": INSPECTION_VALID,
                    "canProceed": True,
                },
            )

        if not inspection.is_inspected and inspection.status == INSPECTION_PENDING:
            return PendingInspection(
                unit=unit,
                custom_reason=tr("eligibility.inspection_pending.reason"),
                custom_suggestion=tr("eligibility.inspection_pending.suggestion"),
            )

        logger.debug(f"Unit {unit.id} inspection status: {inspection.status}")
        return CustomError(
            unit=unit,
            custom_reason=tr("eligibility.inspection_failed.reason"),
            custom_suggestion=inspection.remarks or tr("eligibility.inspection_required.suggestion"),
        )

    def get_navigation_action(self, result: MarineUnitValidationResult) -> MarineUnitNavigationAction:
        if isinstance(result, Eligible):
            return ProceedToNextStep(selected_unit=result.unit, additional_data=dict(result.additional_data))

        if not isinstance(result, CustomError):
            return generic_rejection(result)

        pending = isinstance(result, PendingInspection)
        return ShowComplianceDetailScreen(
            marine_unit=result.unit,
            compliance_issues=[
                ComplianceIssue(
                    category=tr("compliance.category.inspection"),
                    title=tr("compliance.issue.pending") if pending else tr("compliance.issue.not_inspected"),
                    description=result.reason,
                    severity=IssueSeverity.WARNING if pending else IssueSeverity.BLOCKING,
                    details=suggestion_details(result),
                )
            ],
            rejection_reason=full_reason(result),
            rejection_title=tr("compliance.pending.title") if pending else tr("compliance.rejected.title"),
        )

    def get_step_title(self) -> str:
        return tr("eligibility.temporary.step.title")

    def get_step_description(self) -> str:
        return tr("eligibility.temporary.step.description")
