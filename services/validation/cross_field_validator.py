# -*- coding: utf-8 -*-
"""
Cross-field validator.

Runs an ordered list of rules over a step's fields. Rules are evaluated in
their configured order against the progressively corrected field list, so
when two rules fail on the same field the later message is the one kept.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

from models.form_field import FormField
from models.validation_result import Invalid
from services.exceptions import RuleConfigurationError
from utils.logger import get_logger

from .validation_rules import CrossStepValidation, ValidationRule

logger = get_logger(__name__)


@dataclass(frozen=True)
class CrossFieldResult:
    """
    Outcome of validating a step against accumulated data.

    ``unattached_errors`` holds failures that no field's error slot carries
    (field id -> message): failures on fields outside the current step and
    failures on fields that keep their error in ``value``. They still block
    navigation.
    """

    fields: Tuple[FormField, ...]
    unattached_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        if self.unattached_errors:
            return False
        return all(f.error is None for f in self.fields)

    @property
    def errors(self) -> Dict[str, str]:
        """All errors keyed by field id, unattached ones included."""
        errors = {f.id: f.error for f in self.fields if f.error is not None}
        errors.update(self.unattached_errors)
        return errors


class CrossFieldValidator:
    """Applies cross-field and cross-step rules to a step's fields."""

    def validate_with_rules(
        self,
        fields: Sequence[FormField],
        rules: Sequence[ValidationRule],
    ) -> List[FormField]:
        """
        Apply same-step rules; CrossStepValidation rules are skipped.

        Returns:
            The fields with rule failures written into their error slot

        Raises:
            RuleConfigurationError: a rule failed on a field that is not in
                ``fields``; this pass has no accumulated data to fall back on
        """
        validated = list(fields)
        for rule in rules:
            self._check_rule(rule)
            if isinstance(rule, CrossStepValidation):
                continue

            result = rule.validate(validated)
            if isinstance(result, Invalid):
                validated, attached = self._apply_error(validated, result)
                if not attached:
                    raise RuleConfigurationError(
                        f"Rule {rule!r} reported an error on '{result.field_id}', "
                        f"which is not a field of this step"
                    )
        return validated

    def validate_with_accumulated_data(
        self,
        current_step_fields: Sequence[FormField],
        form_data: Mapping[str, str],
        rules: Sequence[ValidationRule],
    ) -> CrossFieldResult:
        """
        Apply every rule: same-step rules see the current fields, cross-step
        rules see ``form_data``.

        Args:
            current_step_fields: Fields of the step being validated
            form_data: Accumulated data of all steps (read only)
            rules: Ordered rules for this step

        Returns:
            CrossFieldResult with updated fields and unattached errors
        """
        validated = list(current_step_fields)
        unattached: Dict[str, str] = {}

        for rule in rules:
            self._check_rule(rule)
            if isinstance(rule, CrossStepValidation):
                result = rule.validate_with_accumulated_data(form_data)
            else:
                result = rule.validate(validated)

            if not isinstance(result, Invalid):
                continue

            logger.debug(f"Rule {rule!r} failed on '{result.field_id}': {result.error}")
            validated, attached = self._apply_error(validated, result)
            if not attached or self._stores_error_in_value(validated, result.field_id):
                unattached[result.field_id] = result.error

        return CrossFieldResult(fields=tuple(validated), unattached_errors=unattached)

    @staticmethod
    def _check_rule(rule):
        if not isinstance(rule, ValidationRule):
            raise RuleConfigurationError(f"Not a validation rule: {rule!r}")

    @staticmethod
    def _stores_error_in_value(fields: List[FormField], field_id: str) -> bool:
        return any(f.id == field_id and f.stores_error_in_value for f in fields)

    @staticmethod
    def _apply_error(fields: List[FormField], result: Invalid) -> Tuple[List[FormField], bool]:
        attached = False
        updated = []
        for f in fields:
            if f.id == result.field_id:
                updated.append(f.copy_with_error(result.error))
                attached = True
            else:
                updated.append(f)
        return updated, attached
