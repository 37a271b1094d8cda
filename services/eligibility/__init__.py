# -*- coding: utf-8 -*-
"""Marine unit eligibility: business rules per transaction and the service running them."""

from .business_rules import BaseMarineUnitRules, MarineUnitBusinessRules
from .eligibility_service import EligibilityReport, EligibilityResolution, MarineUnitEligibilityService
from .mortgage_certificate_rules import MortgageCertificateRules
from .release_mortgage_rules import ReleaseMortgageRules
from .rules_factory import MarineUnitRulesFactory
from .temporary_registration_rules import PendingInspection, TemporaryRegistrationRules

__all__ = [
    "MarineUnitBusinessRules",
    "BaseMarineUnitRules",
    "MortgageCertificateRules",
    "ReleaseMortgageRules",
    "TemporaryRegistrationRules",
    "PendingInspection",
    "MarineUnitRulesFactory",
    "MarineUnitEligibilityService",
    "EligibilityResolution",
    "EligibilityReport",
]
