# -*- coding: utf-8 -*-
"""
Smoke tests to ensure the wizard core doesn't break after changes.
These tests verify the packages import and wire together.
"""
import pytest


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from models import FIELD_TYPES, StepDescriptor, MarineUnit, TransactionType
        from models.eligibility import Eligible
        from models.navigation_action import ProceedToNextStep
        from services.validation import FormValidator, ValidationFactory
        from services.eligibility import MarineUnitEligibilityService, MarineUnitRulesFactory
        from controllers import MarineUnitController
        from ui.wizards.framework import StepNavigator, WizardContext
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_lazy_service_exports():
    """Test that the services package resolves its lazy exports."""
    import services

    assert services.FormValidator.__name__ == "FormValidator"
    assert services.MarineUnitRulesFactory.__name__ == "MarineUnitRulesFactory"
    with pytest.raises(AttributeError):
        services.DoesNotExist


def test_lazy_repository_exports():
    import repositories

    assert repositories.ApiMarineUnitRepository.__name__ == "ApiMarineUnitRepository"


def test_every_field_variant_has_a_handler():
    """Test that the field validator covers the closed field family."""
    from models.form_field import FIELD_TYPES
    from services.validation.field_validator import FieldValidator

    assert set(FieldValidator().supported_types) == set(FIELD_TYPES)


def test_logger_is_namespaced():
    from utils.logger import get_logger

    assert get_logger("smoke").name == "mtcit.smoke"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
