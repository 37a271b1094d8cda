# -*- coding: utf-8 -*-
"""
Marine Unit Controller
======================
Runs eligibility checks of the marine unit selection step off the UI thread.

Each selection gets a token. A resolution is applied only when its token is
still the latest one and the wizard session is still open; anything else is
discarded.
"""

import json
from typing import List, Optional

from PyQt5.QtCore import QThread, pyqtSignal, pyqtSlot

from models.eligibility import Eligible
from models.marine_unit import MarineUnit
from services.eligibility.business_rules import MarineUnitBusinessRules
from services.eligibility.eligibility_service import EligibilityResolution, MarineUnitEligibilityService
from services.eligibility.rules_factory import MarineUnitRulesFactory
from ui.wizards.framework.step_navigator import StepNavigator
from ui.wizards.framework.wizard_context import WizardContext
from utils.logger import get_logger

from .base_controller import BaseController, OperationResult

logger = get_logger(__name__)

SELECTED_UNITS_FIELD = "selectedMarineUnits"


class EligibilityWorker(QThread):
    """Background worker resolving one selected unit."""

    resolved = pyqtSignal(int, object)  # token, EligibilityResolution

    def __init__(self, token: int, service: MarineUnitEligibilityService, unit: MarineUnit,
                 user_id: str, rules: MarineUnitBusinessRules):
        super().__init__()
        self.token = token
        self.service = service
        self.unit = unit
        self.user_id = user_id
        self.rules = rules

    def run(self):
        """Resolve in background; lookup failures come back as a resolution."""
        resolution = self.service.validate_and_resolve_action(self.unit, self.user_id, self.rules)
        self.resolved.emit(self.token, resolution)


class MarineUnitController(BaseController):
    """
    Controller of the marine unit selection step.

    Signals:
        selection_resolved(EligibilityResolution): latest selection resolved
        selection_discarded(int): a stale resolution (token) was dropped
    """

    selection_resolved = pyqtSignal(object)
    selection_discarded = pyqtSignal(int)

    def __init__(
        self,
        context: WizardContext,
        eligibility_service: MarineUnitEligibilityService,
        rules_factory: MarineUnitRulesFactory,
        navigator: Optional[StepNavigator] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.context = context
        self.eligibility_service = eligibility_service
        self.rules_factory = rules_factory
        self.navigator = navigator

        self._token = 0
        self._last_unit: Optional[MarineUnit] = None
        self._workers: List[EligibilityWorker] = []

    @property
    def current_token(self) -> int:
        return self._token

    @property
    def rules(self) -> MarineUnitBusinessRules:
        return self.rules_factory.get_rules(self.context.transaction_type)

    def load_units(self) -> OperationResult:
        """Fetch the user's units with their verdicts (synchronous)."""
        return self.execute_with_error_handling(
            "load_units",
            self.eligibility_service.get_units_with_results,
            self.context.user_id,
            self.rules,
        )

    def select_unit(self, unit: MarineUnit) -> int:
        """
        Start resolving a selected unit in the background.

        Returns:
            The token tagging this selection
        """
        self._token += 1
        self._last_unit = unit
        token = self._token

        worker = EligibilityWorker(token, self.eligibility_service, unit, self.context.user_id, self.rules)
        worker.resolved.connect(self._on_resolution_finished)
        worker.finished.connect(lambda: self._release_worker(worker))
        self._workers.append(worker)

        logger.info(f"Resolving eligibility of unit {unit.id} (token {token})")
        self._emit_started("select_unit")
        worker.start()
        return token

    def retry(self) -> Optional[int]:
        """Resolve the last selected unit again."""
        if self._last_unit is None:
            return None
        return self.select_unit(self._last_unit)

    def cancel_pending(self):
        """Invalidate any resolution still running."""
        self._token += 1
        self._set_loading(False)

    def _release_worker(self, worker: EligibilityWorker):
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def wait_for_workers(self, msecs: int = 5000):
        for worker in list(self._workers):
            worker.wait(msecs)

    @pyqtSlot(int, object)
    def _on_resolution_finished(self, token: int, resolution: EligibilityResolution):
        """Apply a resolution unless it is stale or the session was abandoned."""
        if token != self._token or self.context.is_abandoned:
            logger.debug(f"Discarding eligibility resolution (token {token}, latest {self._token})")
            self.selection_discarded.emit(token)
            return

        self._emit_completed("select_unit", not resolution.lookup_failed)

        if isinstance(resolution.result, Eligible):
            unit = resolution.result.unit
            self.context.update_field(SELECTED_UNITS_FIELD, json.dumps([unit.id]))
            self.context.update_fields(resolution.result.additional_data)

        self.selection_resolved.emit(resolution)

        if self.navigator is not None:
            self.navigator.apply_navigation_action(resolution.action)
