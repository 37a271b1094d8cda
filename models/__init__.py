# -*- coding: utf-8 -*-
"""
Transaction wizard data models
"""

from .form_field import (
    FormField,
    TextField,
    DropDown,
    CheckBox,
    DatePicker,
    FileUpload,
    OwnerList,
    EngineList,
    SailorList,
    SelectableList,
    MarineUnitSelector,
    RadioGroup,
    RadioOption,
    InfoCard,
    PhoneNumberField,
    OTPField,
    MultiSelectDropDown,
    PaymentDetails,
    PaymentLineItem,
    FIELD_TYPES,
)
from .step import StepDescriptor, StepType
from .validation_result import ValidationResult, Success, Error, RuleResult, Valid, Invalid
from .marine_unit import MarineUnit, MortgageStatus, InspectionStatus
from .transaction_type import TransactionType

__all__ = [
    "FormField",
    "TextField",
    "DropDown",
    "CheckBox",
    "DatePicker",
    "FileUpload",
    "OwnerList",
    "EngineList",
    "SailorList",
    "SelectableList",
    "MarineUnitSelector",
    "RadioGroup",
    "RadioOption",
    "InfoCard",
    "PhoneNumberField",
    "OTPField",
    "MultiSelectDropDown",
    "PaymentDetails",
    "PaymentLineItem",
    "FIELD_TYPES",
    "StepDescriptor",
    "StepType",
    "ValidationResult",
    "Success",
    "Error",
    "RuleResult",
    "Valid",
    "Invalid",
    "MarineUnit",
    "MortgageStatus",
    "InspectionStatus",
    "TransactionType",
]
