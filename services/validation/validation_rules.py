# -*- coding: utf-8 -*-
"""
Cross-field validation rules.

Same-step rules look at the fields of the step being validated. The
cross-step rule (CrossStepValidation) looks at the accumulated form data of
the whole wizard session instead.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from models.form_field import DropDown, FormField, TextField
from models.validation_result import Invalid, RuleResult, Valid


class Comparison(Enum):
    GREATER_THAN = "gt"
    LESS_THAN = "lt"
    GREATER_THAN_OR_EQUAL = "ge"
    LESS_THAN_OR_EQUAL = "le"
    EQUAL = "eq"
    NOT_EQUAL = "ne"

    def holds(self, left: float, right: float) -> bool:
        if self is Comparison.GREATER_THAN:
            return left > right
        if self is Comparison.LESS_THAN:
            return left < right
        if self is Comparison.GREATER_THAN_OR_EQUAL:
            return left >= right
        if self is Comparison.LESS_THAN_OR_EQUAL:
            return left <= right
        if self is Comparison.EQUAL:
            return left == right
        return left != right


def find_field(fields: Sequence[FormField], field_id: str) -> Optional[FormField]:
    for field in fields:
        if field.id == field_id:
            return field
    return None


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a decimal string, None when blank or unparseable."""
    if value is None or not str(value).strip():
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_int(value: Optional[str]) -> Optional[int]:
    if value is None or not str(value).strip():
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _is_blank_input(field: Optional[FormField]) -> bool:
    """Only text inputs and dropdowns count as blank; other variants never do."""
    if isinstance(field, (TextField, DropDown)):
        return not field.value.strip()
    return False


class ValidationRule(ABC):
    """Base class for cross-field validation rules."""

    @abstractmethod
    def validate(self, fields: Sequence[FormField]) -> RuleResult:
        """Evaluate the rule against the fields of the current step."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CrossStepValidation(ValidationRule):
    """
    Require ``required_field_id`` in the accumulated data when the trigger
    value satisfies ``trigger_condition``.

    The error is reported on ``error_field_id``, which may belong to a
    different step than the one being validated.
    """

    def __init__(
        self,
        trigger_field_id: str,
        trigger_condition: Callable[[Optional[str]], bool],
        required_field_id: str,
        error_field_id: str,
        error_message: str,
    ):
        self.trigger_field_id = trigger_field_id
        self.trigger_condition = trigger_condition
        self.required_field_id = required_field_id
        self.error_field_id = error_field_id
        self.error_message = error_message

    def validate(self, fields: Sequence[FormField]) -> RuleResult:
        return Valid()

    def validate_with_accumulated_data(self, form_data: Mapping[str, str]) -> RuleResult:
        trigger_value = form_data.get(self.trigger_field_id)
        if not self.trigger_condition(trigger_value):
            return Valid()

        required_value = form_data.get(self.required_field_id)
        if required_value is None or not str(required_value).strip():
            return Invalid(self.error_field_id, self.error_message)
        return Valid()

    def __repr__(self) -> str:
        return (
            f"CrossStepValidation({self.trigger_field_id} -> "
            f"{self.required_field_id}, error on {self.error_field_id})"
        )


class ConditionalRequired(ValidationRule):
    """Field becomes required when the trigger field meets a condition."""

    def __init__(
        self,
        trigger_field_id: str,
        trigger_condition: Callable[[FormField], bool],
        required_field_id: str,
        error_message: str,
    ):
        self.trigger_field_id = trigger_field_id
        self.trigger_condition = trigger_condition
        self.required_field_id = required_field_id
        self.error_message = error_message

    def validate(self, fields: Sequence[FormField]) -> RuleResult:
        trigger = find_field(fields, self.trigger_field_id)
        required = find_field(fields, self.required_field_id)
        if trigger is None or required is None:
            return Valid()

        if self.trigger_condition(trigger) and _is_blank_input(required):
            return Invalid(self.required_field_id, self.error_message)
        return Valid()


class NumericComparison(ValidationRule):
    """
    Compare two numeric text fields, e.g. netTonnage <= grossTonnage.

    Blank or unparseable values pass; the field validator owns format errors.
    """

    def __init__(
        self,
        field1_id: str,
        field2_id: str,
        comparison: Comparison,
        error_field_id: str,
        error_message: str,
    ):
        self.field1_id = field1_id
        self.field2_id = field2_id
        self.comparison = comparison
        self.error_field_id = error_field_id
        self.error_message = error_message

    def validate(self, fields: Sequence[FormField]) -> RuleResult:
        field1 = find_field(fields, self.field1_id)
        field2 = find_field(fields, self.field2_id)
        if not isinstance(field1, TextField) or not isinstance(field2, TextField):
            return Valid()

        value1 = parse_float(field1.value)
        value2 = parse_float(field2.value)
        if value1 is None or value2 is None:
            return Valid()

        if self.comparison.holds(value1, value2):
            return Valid()
        return Invalid(self.error_field_id, self.error_message)

    def __repr__(self) -> str:
        return f"NumericComparison({self.field1_id} {self.comparison.name} {self.field2_id})"


class CustomValidation(ValidationRule):
    """
    Arbitrary predicate over a set of fields.

    Passes without calling ``logic`` when any of ``field_ids`` is absent from
    the step.
    """

    def __init__(
        self,
        field_ids: List[str],
        error_field_id: str,
        error_message: str,
        logic: Callable[[List[FormField]], bool],
    ):
        self.field_ids = list(field_ids)
        self.error_field_id = error_field_id
        self.error_message = error_message
        self.logic = logic

    def validate(self, fields: Sequence[FormField]) -> RuleResult:
        relevant = [f for f in fields if f.id in self.field_ids]
        if len(relevant) != len(self.field_ids):
            return Valid()

        if self.logic(relevant):
            return Valid()
        return Invalid(self.error_field_id, self.error_message)

    def __repr__(self) -> str:
        return f"CustomValidation({', '.join(self.field_ids)} -> {self.error_field_id})"


class MultiFieldCondition(ValidationRule):
    """
    Require a field when all (or any) of several field conditions hold.

    A condition on a field missing from the step counts as not met.
    """

    def __init__(
        self,
        conditions: Dict[str, Callable[[FormField], bool]],
        required_field_id: str,
        error_message: str,
        all_must_match: bool = True,
    ):
        self.conditions = dict(conditions)
        self.required_field_id = required_field_id
        self.error_message = error_message
        self.all_must_match = all_must_match

    def validate(self, fields: Sequence[FormField]) -> RuleResult:
        matches = []
        for field_id, condition in self.conditions.items():
            field = find_field(fields, field_id)
            matches.append(field is not None and bool(condition(field)))

        should_require = all(matches) if self.all_must_match else any(matches)
        if not should_require:
            return Valid()

        if _is_blank_input(find_field(fields, self.required_field_id)):
            return Invalid(self.required_field_id, self.error_message)
        return Valid()
