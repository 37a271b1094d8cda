# -*- coding: utf-8 -*-
"""
Wizard Framework - session state and step navigation for transaction wizards.
"""

from .wizard_context import WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'WizardContext',
    'StepNavigator'
]
