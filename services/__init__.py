# -*- coding: utf-8 -*-
"""
Transaction wizard service layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "FieldValidator",
    "FormValidator",
    "CrossFieldValidator",
    "StepValidator",
    "StepNavigationService",
    "MarineUnitEligibilityService",
    "MarineUnitRulesFactory",
    "MtcitApiClient",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "FieldValidator":
        from .validation.field_validator import FieldValidator
        return FieldValidator
    elif name == "FormValidator":
        from .validation.field_validator import FormValidator
        return FormValidator
    elif name == "CrossFieldValidator":
        from .validation.cross_field_validator import CrossFieldValidator
        return CrossFieldValidator
    elif name == "StepValidator":
        from .wizard.step_validator import StepValidator
        return StepValidator
    elif name == "StepNavigationService":
        from .wizard.step_navigation import StepNavigationService
        return StepNavigationService
    elif name == "MarineUnitEligibilityService":
        from .eligibility.eligibility_service import MarineUnitEligibilityService
        return MarineUnitEligibilityService
    elif name == "MarineUnitRulesFactory":
        from .eligibility.rules_factory import MarineUnitRulesFactory
        return MarineUnitRulesFactory
    elif name == "MtcitApiClient":
        from .api_client import MtcitApiClient
        return MtcitApiClient
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
