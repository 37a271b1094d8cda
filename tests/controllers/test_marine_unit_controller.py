# -*- coding: utf-8 -*-
"""
Tests for MarineUnitController.
"""

import json

import pytest

from controllers.marine_unit_controller import MarineUnitController
from models.eligibility import Eligible, NotOwned
from models.form_field import MarineUnitSelector, TextField
from models.navigation_action import ProceedToNextStep, ShowComplianceDetailScreen
from models.step import StepDescriptor, StepType
from models.transaction_type import TransactionType
from services.eligibility.eligibility_service import EligibilityResolution, MarineUnitEligibilityService
from services.eligibility.rules_factory import MarineUnitRulesFactory
from services.exceptions import NetworkException
from ui.wizards.framework.step_navigator import StepNavigator
from ui.wizards.framework.wizard_context import WizardContext


@pytest.fixture
def context():
    return WizardContext(transaction_type=TransactionType.MORTGAGE_CERTIFICATE, user_id="user-1")


@pytest.fixture
def navigator(qtbot, context):
    steps = [
        StepDescriptor(
            title="Unit",
            fields=[MarineUnitSelector(id="selectedMarineUnits", mandatory=True)],
            step_type=StepType.MARINE_UNIT_SELECTION,
        ),
        StepDescriptor(title="Mortgage", fields=[TextField(id="mortgageValue")], step_type=StepType.MORTGAGE_DATA),
    ]
    return StepNavigator(context, steps)


@pytest.fixture
def controller(qtbot, context, unit_repository, mortgage_repository, navigator):
    controller = MarineUnitController(
        context,
        MarineUnitEligibilityService(unit_repository, max_workers=2),
        MarineUnitRulesFactory(unit_repository, mortgage_repository),
        navigator=navigator,
    )
    yield controller
    controller.wait_for_workers()


class TestSelection:
    """Background resolution of a selected unit."""

    def test_eligible_unit_advances_wizard(self, controller, context, navigator, unit, qtbot):
        with qtbot.waitSignal(controller.selection_resolved, timeout=5000) as blocker:
            controller.select_unit(unit)

        resolution = blocker.args[0]
        assert isinstance(resolution.result, Eligible)
        assert isinstance(resolution.action, ProceedToNextStep)
        assert json.loads(context.get_value("selectedMarineUnits")) == ["U1"]
        assert context.get_value("mortgageStatus") == "FREE"
        assert navigator.current_index == 1

    def test_ineligible_unit_emits_compliance_screen(self, controller, navigator, unit, unit_repository, qtbot):
        unit_repository.owners["U1"] = "someone-else"

        with qtbot.waitSignal(navigator.navigation_action_requested, timeout=5000) as blocker:
            controller.select_unit(unit)

        assert isinstance(blocker.args[0], ShowComplianceDetailScreen)
        assert navigator.current_index == 0

    def test_lookup_failure(self, controller, context, unit, unit_repository, qtbot):
        unit_repository.failing["U1"] = NetworkException("connection refused")

        with qtbot.waitSignal(controller.selection_resolved, timeout=5000) as blocker:
            controller.select_unit(unit)

        assert blocker.args[0].lookup_failed
        assert context.get_value("selectedMarineUnits") == ""

    def test_retry_uses_last_unit(self, controller, unit, qtbot):
        assert controller.retry() is None

        with qtbot.waitSignal(controller.selection_resolved, timeout=5000):
            controller.select_unit(unit)
        with qtbot.waitSignal(controller.selection_resolved, timeout=5000) as blocker:
            controller.retry()

        assert blocker.args[0].result.unit == unit


class TestStaleResults:
    """Late resolutions are dropped."""

    def test_older_token_discarded(self, controller, context, unit, second_unit, qtbot):
        stale = EligibilityResolution(result=Eligible(unit=second_unit), action=ProceedToNextStep(second_unit))
        controller._token = 2

        with qtbot.waitSignal(controller.selection_discarded) as blocker:
            controller._on_resolution_finished(1, stale)

        assert blocker.args == [1]
        assert context.get_value("selectedMarineUnits") == ""

    def test_abandoned_session_discarded(self, controller, context, unit, qtbot):
        resolution = EligibilityResolution(result=NotOwned(unit=unit), action=ProceedToNextStep(unit))
        context.abandon()

        with qtbot.assertNotEmitted(controller.selection_resolved):
            controller._on_resolution_finished(controller.current_token, resolution)

    def test_cancel_pending_invalidates_token(self, controller, unit, qtbot):
        token = controller.select_unit(unit)
        controller.cancel_pending()

        with qtbot.waitSignal(controller.selection_discarded, timeout=5000) as blocker:
            pass
        assert blocker.args == [token]


class TestLoadUnits:

    def test_load_units(self, controller, unit, second_unit):
        result = controller.load_units()

        assert result.success
        units, report = result.data
        assert units == [unit, second_unit]
        assert set(report.results) == {"U1", "U2"}

    def test_load_units_failure(self, controller, unit_repository, qtbot):
        def fail(user_id):
            raise NetworkException("connection refused")

        unit_repository.get_user_marine_units = fail

        with qtbot.waitSignal(controller.operation_error) as blocker:
            result = controller.load_units()

        assert not result.success
        assert blocker.args == ["load_units", "Connection error. Please check your internet connection."]

    def test_unexpected_error_propagates_and_resets_loading(self, controller, unit_repository, qtbot):
        def broken(user_id):
            raise KeyError("ownerId")

        unit_repository.get_user_marine_units = broken

        with qtbot.waitSignal(controller.loading_changed, check_params_cb=lambda loading: not loading) as blocker:
            with pytest.raises(KeyError):
                controller.load_units()

        assert blocker.args == [False]
        assert not controller.is_loading
