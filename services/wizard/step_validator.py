# -*- coding: utf-8 -*-
"""
Step validation service for transaction wizards.

Validates a step's submitted values without UI coupling.
"""

import re
from dataclasses import replace
from typing import Dict, Mapping, Optional, Sequence, Tuple

from app.config import Config
from models.form_field import CheckBox, FormField, TextField
from models.step import StepDescriptor
from services.translation_manager import tr
from services.validation.field_validator import FormValidator
from services.validation.validation_rules import ValidationRule
from utils.logger import get_logger

logger = get_logger(__name__)

# Fields that only apply when the applicant is a company
COMPANY_ONLY_FIELDS = ("companyName", "companyRegistrationNumber", "companyType")

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9+._%\-]{1,256}@[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+$"
)


class StepValidator:
    """Validates wizard step data against its field descriptors."""

    def __init__(self, form_validator: Optional[FormValidator] = None):
        self.form_validator = form_validator or FormValidator()

    @staticmethod
    def should_validate_field(field: FormField, form_data: Mapping[str, str]) -> bool:
        """Company-only fields apply when ``isCompany`` is "true"."""
        if field.id in COMPANY_ONLY_FIELDS:
            return form_data.get("isCompany") == "true"
        return True

    def are_mandatory_fields_filled(self, step: StepDescriptor, form_data: Mapping[str, str]) -> bool:
        """
        Check that every applicable mandatory field has a value.

        Only presence is checked, not correctness; this drives the Next button.
        """
        for field in step.fields:
            if not field.mandatory or not self.should_validate_field(field, form_data):
                continue

            value = form_data.get(field.id) or ""
            if not value:
                return False

            if field.id == "selectedMarineUnits" and (value == "[]" or not value.strip()):
                return False

            if field.id == "sailors":
                has_excel_file = bool((form_data.get("crewExcelFile") or "").strip())
                has_sailors = value != "[]" and bool(value.strip())
                if not has_excel_file and not has_sailors:
                    return False

            if isinstance(field, CheckBox) and value != "true":
                return False

        return True

    def validate_step(self, step: StepDescriptor, form_data: Mapping[str, str]) -> Tuple[bool, Dict[str, str]]:
        """
        Submit-time check of the mandatory fields of a step.

        Args:
            step: Step descriptor
            form_data: Submitted values keyed by field id

        Returns:
            Tuple of (is_valid, errors by field id)
        """
        errors: Dict[str, str] = {}

        for field in step.fields:
            if not field.mandatory or not self.should_validate_field(field, form_data):
                continue

            value = form_data.get(field.id) or ""
            message = self._submit_error(field, value)
            if message is not None:
                errors[field.id] = message

        return not errors, errors

    @staticmethod
    def _submit_error(field: FormField, value: str) -> Optional[str]:
        field_id = field.id.lower()

        if not value or (isinstance(field, CheckBox) and value != "true"):
            return tr("validation.step.required")
        if "email" in field_id and not EMAIL_PATTERN.match(value):
            return tr("validation.step.email")
        if "mobile" in field_id or "phone" in field_id:
            if not is_valid_phone(value):
                return tr("validation.step.phone")
            return None
        if isinstance(field, TextField) and field.is_numeric and not value.isdecimal():
            return tr("validation.step.numeric_only")
        return None

    def validate_step_with_accumulated_data(
        self,
        step: StepDescriptor,
        current_step_data: Mapping[str, str],
        accumulated_data: Mapping[str, str],
        rules: Sequence[ValidationRule] = (),
    ) -> Tuple[bool, Dict[str, str]]:
        """
        Validate a step with access to data entered on earlier steps.

        The current step's values win over accumulated ones. Errors reported
        by cross-step rules on fields outside this step are returned under
        their own field id, so the caller still blocks.

        Returns:
            Tuple of (is_valid, errors by field id)
        """
        combined = dict(accumulated_data)
        combined.update(current_step_data)

        fields = [_with_value(f, current_step_data.get(f.id) or "") for f in step.fields]

        if rules:
            result = self.form_validator.validate_with_accumulated_data(fields, combined, rules)
            errors = result.errors
        else:
            validated = self.form_validator.validate_all(fields)
            errors = {f.id: f.error for f in validated if f.error is not None}

        if errors:
            logger.debug(f"Step '{step.title}' has errors on: {sorted(errors)}")
        return not errors, errors


def is_valid_phone(phone: str) -> bool:
    return len(phone) >= Config.PHONE_MIN_DIGITS and phone.isdecimal()


def _with_value(field: FormField, value: str) -> FormField:
    if isinstance(field, CheckBox):
        return field.copy_with_value("true" if value.lower() == "true" else "false")
    return replace(field, value=value)
