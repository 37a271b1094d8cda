# -*- coding: utf-8 -*-
"""Controllers coordinating services with the wizard UI."""

from .base_controller import BaseController, OperationResult
from .marine_unit_controller import EligibilityWorker, MarineUnitController

__all__ = [
    "BaseController",
    "OperationResult",
    "EligibilityWorker",
    "MarineUnitController",
]
