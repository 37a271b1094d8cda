# -*- coding: utf-8 -*-
"""
Tests for eligibility verdicts, navigation actions and marine unit payloads.
"""

import pytest

from models.eligibility import (
    INELIGIBLE_TYPES,
    AlreadyMortgaged,
    CustomError,
    Eligible,
    HasViolations,
    Ineligible,
    NotOwned,
)
from models.marine_unit import InspectionStatus, MarineUnit, MortgageStatus
from models.navigation_action import (
    JumpToStep,
    ProceedToNextStep,
    ShowConfirmation,
    ShowError,
)
from models.transaction_type import TransactionType
from services.translation_manager import set_language


class TestVerdicts:

    def test_eligible(self, unit):
        result = Eligible(unit=unit, additional_data={"canProceed": True})
        assert result.is_eligible

    def test_ineligible_reason_and_suggestion(self, unit):
        result = HasViolations(unit=unit, violations_count=3)

        assert not result.is_eligible
        assert "3 violations" in result.reason
        assert result.suggestion

    def test_reason_follows_language(self, unit):
        result = NotOwned(unit=unit)
        english = result.reason

        set_language("ar")
        assert result.reason != english
        assert result.reason == "الوحدة البحرية غير مسجلة باسمك"

    def test_mortgaged_reason_mentions_bank(self, unit):
        result = AlreadyMortgaged(unit=unit, bank_name="Bank Muscat", mortgage_end_date="2030-01-01")
        assert "Bank Muscat" in result.reason

    def test_custom_error_texts(self, unit):
        result = CustomError(unit=unit, custom_reason="r", custom_suggestion="s")
        assert (result.reason, result.suggestion) == ("r", "s")

    def test_closed_family(self):
        assert len(INELIGIBLE_TYPES) == 8
        assert all(issubclass(t, Ineligible) for t in INELIGIBLE_TYPES)

    def test_ineligible_base_is_abstract(self):
        with pytest.raises(TypeError):
            Ineligible()


class TestShowConfirmation:
    """Confirmations wrap exactly one non-confirmation action."""

    def test_wraps_action(self, unit):
        confirmation = ShowConfirmation(message="Sure?", on_confirm=ProceedToNextStep(selected_unit=unit))
        assert isinstance(confirmation.on_confirm, ProceedToNextStep)

    def test_nesting_rejected(self):
        inner = ShowConfirmation(message="Sure?", on_confirm=JumpToStep(step_index=2))
        with pytest.raises(ValueError):
            ShowConfirmation(message="Really?", on_confirm=inner)

    def test_non_action_rejected(self):
        with pytest.raises(TypeError):
            ShowConfirmation(message="Sure?", on_confirm="next")

    def test_show_error_defaults_to_no_actions(self):
        assert ShowError(title="t", message="m").actions == []


class TestMarineUnitPayloads:
    """Backend payload parsing."""

    def test_from_api_dict(self):
        unit = MarineUnit.from_api_dict({
            "id": 42,
            "shipName": "Al Bahar",
            "imoNumber": "9123456",
            "portOfRegistry": {"id": "OMMCT"},
            "isTemp": "1",
            "violationsCount": "2",
            "isMortgaged": "true",
        })

        assert unit.id == "42"
        assert unit.port_of_registry == "OMMCT"
        assert unit.is_temporary
        assert unit.registration_type == "TEMPORARY"
        assert unit.violations_count == 2
        assert unit.is_mortgaged is True

    def test_dict_round_trip(self, unit):
        assert MarineUnit.from_dict(unit.to_dict()) == unit

    def test_mortgage_status(self):
        status = MortgageStatus.from_api_dict({"isMortgaged": True, "bankName": "Bank Dhofar"})
        assert status.is_mortgaged
        assert status.bank_name == "Bank Dhofar"
        assert status.is_approved_bank is True

    def test_inspection_status(self):
        status = InspectionStatus.from_api_dict({"isInspected": False, "status": "PENDING"})
        assert not status.is_inspected
        assert status.status == "PENDING"


class TestTransactionType:

    def test_from_name(self):
        assert TransactionType.from_name("RELEASE_MORTGAGE") is TransactionType.RELEASE_MORTGAGE

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            TransactionType.from_name("NOPE")

    def test_display_name(self):
        assert TransactionType.RELEASE_MORTGAGE.display_name == "فك الرهن"
