# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_rules import (
    ValidationRule,
    CrossStepValidation,
    ConditionalRequired,
    NumericComparison,
    CustomValidation,
    MultiFieldCondition,
    Comparison,
)
from .cross_field_validator import CrossFieldValidator, CrossFieldResult
from .field_validator import FieldValidator, FormValidator
from .validation_factory import ValidationFactory

__all__ = [
    'ValidationRule',
    'CrossStepValidation',
    'ConditionalRequired',
    'NumericComparison',
    'CustomValidation',
    'MultiFieldCondition',
    'Comparison',
    'CrossFieldValidator',
    'CrossFieldResult',
    'FieldValidator',
    'FormValidator',
    'ValidationFactory',
]
