# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous/jump)
- Step validation against the accumulated data before moving forward
- Navigation actions produced by marine unit eligibility checks
"""

from typing import Any, List, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from models.navigation_action import (
    ACTION_TYPES,
    JumpToStep,
    MarineUnitNavigationAction,
    ProceedToNextStep,
    RouteToConditionalStep,
)
from models.step import StepDescriptor
from services.validation.validation_factory import ValidationFactory
from services.wizard.step_navigation import StepNavigationService
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

from .wizard_context import WizardContext

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Drives one wizard session over a WizardContext.

    Responsibilities:
    - Track current step
    - Validate before moving forward
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(dict)  # field_id -> message
    navigation_action_requested = pyqtSignal(object)  # actions the host must present
    wizard_finished = pyqtSignal()

    def __init__(
        self,
        context: WizardContext,
        steps: List[StepDescriptor],
        navigation_service: Optional[StepNavigationService] = None,
        step_validator: Optional[StepValidator] = None,
        validation_factory: Optional[ValidationFactory] = None,
    ):
        """
        Initialize the navigator.

        Args:
            context: Wizard context
            steps: Ordered step descriptors
        """
        super().__init__()
        self.context = context
        self.steps = list(steps)
        self.step_validator = step_validator or StepValidator()
        self.navigation_service = navigation_service or StepNavigationService(self.step_validator)
        self.validation_factory = validation_factory or ValidationFactory()

    @property
    def current_index(self) -> int:
        return self.context.current_step_index

    def get_current_step(self) -> Optional[StepDescriptor]:
        """Get the current step."""
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    def can_go_next(self) -> bool:
        """Mandatory fields of the current step are filled."""
        if self.context.is_abandoned:
            return False
        return self.navigation_service.can_proceed(self.current_index, self.steps, self.context.snapshot())

    def can_go_previous(self) -> bool:
        return self.navigation_service.previous_step(self.current_index) is not None

    def validate_current_step(self) -> dict:
        """
        Validate the current step with the accumulated data.

        Returns:
            Errors by field id (empty when the step is valid)
        """
        step = self.get_current_step()
        if step is None:
            return {}

        snapshot = self.context.snapshot()
        current_values = {field_id: snapshot.get(field_id, "") for field_id in step.field_ids}
        rules = self.validation_factory.rules_for_step(step, snapshot)
        _, errors = self.step_validator.validate_step_with_accumulated_data(step, current_values, snapshot, rules)
        return errors

    def next_step(self, skip_validation: bool = False) -> bool:
        """
        Validate the current step and move to the next one.

        On the last step a successful validation finishes the wizard.

        Returns:
            True if the step was accepted
        """
        if self.context.is_abandoned:
            logger.debug("Ignoring next_step on an abandoned session")
            return False

        if not skip_validation:
            errors = self.validate_current_step()
            if errors:
                logger.warning(f"Step {self.current_index} validation failed: {sorted(errors)}")
                self.validation_failed.emit(errors)
                return False

        self.context.mark_step_completed(self.current_index)

        following = self.navigation_service.next_step(self.current_index, len(self.steps))
        if following is None:
            if self.navigation_service.is_terminal(
                self.current_index, len(self.steps), self.steps, self.context.snapshot()
            ):
                logger.info(f"Wizard {self.context.reference_number} finished")
                self.context.complete()
                self.wizard_finished.emit()
                return True
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        logger.info(f"Navigating: Step {self.current_index} → {following}")
        return self._navigate_to(following)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        previous = self.navigation_service.previous_step(self.current_index)
        if previous is None:
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {previous}")
        return self._navigate_to(previous)

    def goto_step(self, index: int) -> bool:
        """
        Navigate to a specific step.

        Only backwards jumps and jumps to completed steps are allowed.
        """
        if index == self.current_index:
            return True

        if not self.navigation_service.can_jump_to(
            index, self.current_index, self.context.completed_steps, len(self.steps)
        ):
            logger.debug(f"Jump to step {index} refused from step {self.current_index}")
            return False

        return self._navigate_to(index)

    def update_field(self, field_id: str, value: Any):
        """Store a field value and refresh the Next button state."""
        self.context.update_field(field_id, value)
        self.can_go_next_changed.emit(self.can_go_next())

    def apply_navigation_action(self, action: MarineUnitNavigationAction) -> bool:
        """
        Apply an eligibility navigation action.

        Actions that move the wizard are applied here; every other action is
        emitted through navigation_action_requested for the host to present.

        Returns:
            True if the current step changed
        """
        if not isinstance(action, ACTION_TYPES):
            raise TypeError(f"Unsupported navigation action: {type(action).__name__}")

        if self.context.is_abandoned:
            logger.debug(f"Ignoring {type(action).__name__} on an abandoned session")
            return False

        if isinstance(action, ProceedToNextStep):
            self.context.update_fields(action.additional_data)
            return self.next_step()

        if isinstance(action, JumpToStep):
            logger.info(f"Jumping to step {action.step_index}: {action.reason}")
            self.context.mark_step_completed(self.current_index)
            return self._navigate_to(action.step_index)

        if isinstance(action, RouteToConditionalStep):
            logger.info(f"Routing to step {action.target_step_index} ({action.condition})")
            self.context.update_fields(action.condition_data)
            self.context.mark_step_completed(self.current_index)
            return self._navigate_to(action.target_step_index)

        self.navigation_action_requested.emit(action)
        return False

    def _navigate_to(self, new_index: int) -> bool:
        """
        Internal method to navigate to a step.

        Args:
            new_index: Target step index

        Returns:
            True if navigation was successful
        """
        if new_index < 0 or new_index >= len(self.steps):
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{len(self.steps)-1})")
            return False

        old_index = self.current_index
        self.context.current_step_index = new_index

        # Emit signals
        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())

        logger.info(f"Navigation complete: Step {new_index} is now active")
        return True
