# -*- coding: utf-8 -*-
"""
Step navigation rules for transaction wizards.
"""

from typing import AbstractSet, Mapping, Optional, Sequence

from models.step import StepDescriptor
from utils.logger import get_logger

from .step_validator import StepValidator

logger = get_logger(__name__)


class StepNavigationService:
    """Decides whether and where a wizard may move."""

    def __init__(self, step_validator: Optional[StepValidator] = None):
        self.step_validator = step_validator or StepValidator()

    def can_proceed(self, current_step: int, steps: Sequence[StepDescriptor], form_data: Mapping[str, str]) -> bool:
        """Mandatory fields of the current step are filled (not validated)."""
        if not 0 <= current_step < len(steps):
            return False
        return self.step_validator.are_mandatory_fields_filled(steps[current_step], form_data)

    @staticmethod
    def next_step(current_step: int, total_steps: int) -> Optional[int]:
        following = current_step + 1
        return following if following < total_steps else None

    @staticmethod
    def previous_step(current_step: int) -> Optional[int]:
        return current_step - 1 if current_step > 0 else None

    @staticmethod
    def can_jump_to(target_step: int, current_step: int, completed_steps: AbstractSet[int], total_steps: int) -> bool:
        """Backwards or to an already completed step, always within range."""
        if not 0 <= target_step < total_steps:
            return False
        return target_step <= current_step or target_step in completed_steps

    def is_terminal(
        self,
        current_step: int,
        total_steps: int,
        steps: Sequence[StepDescriptor],
        form_data: Mapping[str, str],
    ) -> bool:
        """Last step reached and every step's mandatory fields are filled."""
        if total_steps <= 0 or current_step != total_steps - 1:
            return False
        return all(self.step_validator.are_mandatory_fields_filled(step, form_data) for step in steps)
