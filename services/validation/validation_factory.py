# -*- coding: utf-8 -*-
"""
Validation Factory - Builds the cross-field rules for a step type.

Provides a central registry mapping each StepType to a rule-list builder.
"""

from typing import Callable, Dict, List, Mapping, Optional

from models.step import StepDescriptor, StepType
from services.exceptions import RuleConfigurationError
from utils.logger import get_logger

from . import rule_sets
from .validation_rules import ValidationRule

logger = get_logger(__name__)

RuleBuilder = Callable[[Mapping[str, str]], List[ValidationRule]]


class ValidationFactory:
    """
    Registry and factory of rule lists keyed by step type.

    Builders receive the accumulated form data snapshot so rules that
    depend on earlier steps can read it. Step types without a builder get
    no cross-field rules.
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._builders: Dict[StepType, RuleBuilder] = {}
        self._register_default_builders()

    def _register_default_builders(self):
        """Register the built-in rule sets."""
        self.register_builder(StepType.SHIP_DIMENSIONS, rule_sets.dimension_rules)
        self.register_builder(StepType.MARINE_UNIT_DATA, rule_sets.date_rules)
        self.register_builder(StepType.SHIP_WEIGHTS, rule_sets.weight_rules)
        self.register_builder(StepType.DOCUMENTS, rule_sets.document_rules)
        self.register_builder(StepType.MORTGAGE_DATA, rule_sets.mortgage_rules)

    def register_builder(self, step_type: StepType, builder: RuleBuilder):
        """
        Register (or replace) the rule builder for a step type.

        Args:
            step_type: StepType the builder serves
            builder: Callable taking the accumulated form data
        """
        if not isinstance(step_type, StepType):
            raise RuleConfigurationError(f"Not a step type: {step_type!r}")
        self._builders[step_type] = builder

    def get_rules(self, step_type: StepType, form_data: Optional[Mapping[str, str]] = None) -> List[ValidationRule]:
        """
        Build the rules for ``step_type``.

        Returns:
            Ordered rule list (empty when nothing is registered)
        """
        builder = self._builders.get(step_type)
        if builder is None:
            return []

        rules = list(builder(form_data or {}))
        for rule in rules:
            if not isinstance(rule, ValidationRule):
                raise RuleConfigurationError(
                    f"Builder for {step_type.name} returned {type(rule).__name__}, not a ValidationRule"
                )
        logger.debug(f"Built {len(rules)} rules for {step_type.name}")
        return rules

    def rules_for_step(self, step: StepDescriptor, form_data: Optional[Mapping[str, str]] = None) -> List[ValidationRule]:
        return self.get_rules(step.step_type, form_data)

    def get_registered_types(self) -> List[StepType]:
        return list(self._builders.keys())
