# -*- coding: utf-8 -*-
"""
Outcome values of field checks and cross-field rules.

Validation never raises for bad user input; it returns one of these.
"""

from dataclasses import dataclass


class ValidationResult:
    """Result of checking a single field."""

    is_valid = True


@dataclass(frozen=True)
class Success(ValidationResult):
    is_valid = True


@dataclass(frozen=True)
class Error(ValidationResult):
    message: str

    is_valid = False


class RuleResult:
    """Result of evaluating one cross-field rule."""

    is_valid = True


@dataclass(frozen=True)
class Valid(RuleResult):
    is_valid = True


@dataclass(frozen=True)
class Invalid(RuleResult):
    field_id: str
    error: str

    is_valid = False
