# -*- coding: utf-8 -*-
"""
Per-field validation and the form validation facade.

FieldValidator checks a single field against the rules of its variant.
FormValidator combines it with the cross-field rule engine.
"""

import json
import math
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Type

from app.config import Config
from models.form_field import (
    CheckBox,
    DatePicker,
    DropDown,
    EngineList,
    FileUpload,
    FormField,
    InfoCard,
    MarineUnitSelector,
    MultiSelectDropDown,
    OTPField,
    OwnerList,
    PaymentDetails,
    PhoneNumberField,
    RadioGroup,
    SailorList,
    SelectableList,
    TextField,
)
from models.validation_result import Error, Success, ValidationResult
from services.exceptions import UnsupportedFieldError
from services.translation_manager import tr
from utils.logger import get_logger

from .cross_field_validator import CrossFieldResult, CrossFieldValidator
from .validation_rules import ValidationRule

logger = get_logger(__name__)

# Variants whose value is refreshed from the accumulated data before validating
_REFRESHABLE_TYPES = (TextField, DropDown, DatePicker, MultiSelectDropDown)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_empty_list(value: Optional[str]) -> bool:
    return _is_blank(value) or value.strip() == "[]"


class FieldValidator:
    """
    Validates individual fields.

    Dispatch is keyed on the exact field type; a FormField subclass without
    a handler raises UnsupportedFieldError.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today
        self._handlers: Dict[Type[FormField], Callable[[FormField], ValidationResult]] = {
            TextField: self._check_text,
            DropDown: self._check_dropdown,
            CheckBox: self._check_checkbox,
            DatePicker: self._check_date,
            FileUpload: self._check_required,
            MarineUnitSelector: self._check_required,
            RadioGroup: self._check_required,
            InfoCard: self._check_required,
            PhoneNumberField: self._check_required,
            OTPField: self._check_required,
            SelectableList: self._check_selectable_list,
            OwnerList: self._check_owner_list,
            EngineList: self._check_engine_list,
            SailorList: self._check_sailor_list,
            MultiSelectDropDown: self._check_multiselect,
            PaymentDetails: self._check_display_only,
        }

    @property
    def supported_types(self):
        return tuple(self._handlers)

    def check(self, field: FormField) -> ValidationResult:
        """Check a field without modifying it."""
        handler = self._handlers.get(type(field))
        if handler is None:
            raise UnsupportedFieldError(field)
        return handler(field)

    def validate(self, field: FormField) -> FormField:
        """Return a copy of ``field`` with its error set or cleared."""
        result = self.check(field)
        if isinstance(result, Error):
            return field.copy_with_error(result.message)
        if field.error is not None:
            return replace(field, error=None)
        return field

    def validate_all(self, fields: Sequence[FormField]) -> List[FormField]:
        return [self.validate(f) for f in fields]

    @staticmethod
    def is_form_valid(fields: Sequence[FormField]) -> bool:
        return all(f.error is None for f in fields)

    # ==================== Handlers ====================

    def _check_text(self, field: TextField) -> ValidationResult:
        if _is_blank(field.value):
            return self._required(field)

        if field.is_numeric and not field.is_decimal:
            if not field.value.isdecimal():
                return Error(tr("validation.field.numeric", label=field.label))
        elif field.is_numeric and field.is_decimal:
            try:
                number = float(field.value)
            except ValueError:
                return Error(tr("validation.field.decimal", label=field.label))
            if not math.isfinite(number):
                return Error(tr("validation.field.decimal", label=field.label))

        if field.is_password and len(field.value) < Config.PASSWORD_MIN_LENGTH:
            return Error(tr("validation.field.password_short", label=field.label))
        return Success()

    @staticmethod
    def _check_dropdown(field: DropDown) -> ValidationResult:
        if _is_blank(field.value) and field.mandatory:
            return Error(tr("validation.field.must_select", label=field.label))
        return Success()

    @staticmethod
    def _check_checkbox(field: CheckBox) -> ValidationResult:
        if not field.checked and field.mandatory:
            return Error(tr("validation.field.must_accept", label=field.label))
        return Success()

    def _check_date(self, field: DatePicker) -> ValidationResult:
        if _is_blank(field.value):
            return self._required(field)

        if not field.allow_past_dates:
            try:
                selected = datetime.strptime(field.value.strip(), Config.DATE_FORMAT).date()
            except ValueError:
                # Format errors belong to the date widget
                return Success()
            if selected < self._today():
                return Error(tr("validation.field.past_date", label=field.label))
        return Success()

    def _check_required(self, field: FormField) -> ValidationResult:
        if _is_blank(field.value):
            return self._required(field)
        return Success()

    @staticmethod
    def _check_selectable_list(field: SelectableList) -> ValidationResult:
        if _is_blank(field.value) and field.mandatory:
            return Error(tr("validation.list.selection_required", label=field.label))
        return Success()

    @staticmethod
    def _check_owner_list(field: OwnerList) -> ValidationResult:
        if _is_empty_list(field.value) and field.mandatory:
            return Error(tr("validation.list.owner_required"))
        return Success()

    @staticmethod
    def _check_engine_list(field: EngineList) -> ValidationResult:
        if _is_empty_list(field.value) and field.mandatory:
            return Error(tr("validation.list.engine_required"))
        return Success()

    @staticmethod
    def _check_sailor_list(field: SailorList) -> ValidationResult:
        if _is_empty_list(field.value) and field.mandatory:
            return Error(tr("validation.list.sailor_required"))
        return Success()

    @staticmethod
    def _check_multiselect(field: MultiSelectDropDown) -> ValidationResult:
        if _is_empty_list(field.value):
            if field.mandatory:
                return Error(tr("validation.multiselect.required", label=field.label))
            return Success()

        if field.max_selection is not None and _selection_count(field) > field.max_selection:
            return Error(tr("validation.multiselect.max", max=field.max_selection))
        return Success()

    @staticmethod
    def _check_display_only(field: FormField) -> ValidationResult:
        return Success()

    @staticmethod
    def _required(field: FormField) -> ValidationResult:
        if field.mandatory:
            return Error(tr("validation.field.required", label=field.label))
        return Success()


def _selection_count(field: MultiSelectDropDown) -> int:
    """Selected options, falling back to the JSON array held in ``value``."""
    if field.selected_options:
        return len(field.selected_options)
    try:
        decoded = json.loads(field.value)
    except ValueError:
        return 0
    return len(decoded) if isinstance(decoded, list) else 0


class FormValidator:
    """
    Form validation facade: per-field checks followed by cross-field rules.

    Usage:
        validator = FormValidator()
        result = validator.validate_with_accumulated_data(step.fields, context.snapshot(), rules)
        if not result.is_valid:
            show(result.errors)
    """

    def __init__(
        self,
        field_validator: Optional[FieldValidator] = None,
        cross_field_validator: Optional[CrossFieldValidator] = None,
    ):
        self.field_validator = field_validator or FieldValidator()
        self.cross_field_validator = cross_field_validator or CrossFieldValidator()

    def validate(self, field: FormField) -> FormField:
        return self.field_validator.validate(field)

    def validate_all(self, fields: Sequence[FormField]) -> List[FormField]:
        return self.field_validator.validate_all(fields)

    def is_form_valid(self, fields: Sequence[FormField]) -> bool:
        return self.field_validator.is_form_valid(fields)

    def validate_with_rules(
        self,
        fields: Sequence[FormField],
        rules: Sequence[ValidationRule],
    ) -> List[FormField]:
        """Basic validation, then same-step rules."""
        basic = self.field_validator.validate_all(fields)
        return self.cross_field_validator.validate_with_rules(basic, rules)

    def validate_with_accumulated_data(
        self,
        current_step_fields: Sequence[FormField],
        form_data: Mapping[str, str],
        rules: Sequence[ValidationRule],
    ) -> CrossFieldResult:
        """
        Refresh input values from ``form_data``, validate each field, then run
        the rule engine against the accumulated data.
        """
        refreshed = []
        for f in current_step_fields:
            if isinstance(f, _REFRESHABLE_TYPES) and f.id in form_data:
                f = replace(f, value=form_data[f.id])
            refreshed.append(self.field_validator.validate(f))

        result = self.cross_field_validator.validate_with_accumulated_data(refreshed, form_data, rules)
        if not result.is_valid:
            logger.debug(f"Step validation failed: {sorted(result.errors)}")
        return result
