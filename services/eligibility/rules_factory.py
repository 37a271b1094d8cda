# -*- coding: utf-8 -*-
"""
Marine unit rules factory: picks the eligibility strategy of a transaction.
"""

from typing import Callable, Dict, List

from models.transaction_type import TransactionType
from repositories.marine_unit_repository import MarineUnitRepository
from repositories.mortgage_repository import MortgageRepository
from services.exceptions import RuleConfigurationError
from utils.logger import get_logger

from .business_rules import MarineUnitBusinessRules
from .mortgage_certificate_rules import MortgageCertificateRules
from .release_mortgage_rules import ReleaseMortgageRules
from .temporary_registration_rules import TemporaryRegistrationRules

logger = get_logger(__name__)


class MarineUnitRulesFactory:
    """
    Registry of eligibility strategies keyed by TransactionType.

    Usage:
        factory = MarineUnitRulesFactory(unit_repo, mortgage_repo)
        rules = factory.get_rules(TransactionType.RELEASE_MORTGAGE)
    """

    def __init__(self, marine_unit_repository: MarineUnitRepository, mortgage_repository: MortgageRepository):
        self.marine_unit_repository = marine_unit_repository
        self.mortgage_repository = mortgage_repository
        self._builders: Dict[TransactionType, Callable[[], MarineUnitBusinessRules]] = {
            TransactionType.MORTGAGE_CERTIFICATE: lambda: MortgageCertificateRules(
                self.marine_unit_repository, self.mortgage_repository
            ),
            TransactionType.RELEASE_MORTGAGE: lambda: ReleaseMortgageRules(
                self.marine_unit_repository, self.mortgage_repository
            ),
            TransactionType.TEMPORARY_REGISTRATION_CERTIFICATE: lambda: TemporaryRegistrationRules(
                self.marine_unit_repository
            ),
        }

    def register(self, transaction_type: TransactionType, builder: Callable[[], MarineUnitBusinessRules]):
        """Register (or replace) the strategy builder of a transaction type."""
        if not isinstance(transaction_type, TransactionType):
            raise RuleConfigurationError(f"Not a transaction type: {transaction_type!r}")
        self._builders[transaction_type] = builder
        logger.debug(f"Registered eligibility rules for {transaction_type.name}")

    def supports(self, transaction_type: TransactionType) -> bool:
        return transaction_type in self._builders

    def get_rules(self, transaction_type: TransactionType) -> MarineUnitBusinessRules:
        """
        Build the strategy for a transaction type.

        Raises:
            RuleConfigurationError: No strategy is registered for the type
        """
        builder = self._builders.get(transaction_type)
        if builder is None:
            raise RuleConfigurationError(
                f"No marine unit rules registered for transaction type {transaction_type}"
            )
        rules = builder()
        if not isinstance(rules, MarineUnitBusinessRules):
            raise RuleConfigurationError(
                f"Builder for {transaction_type} returned {type(rules).__name__}, not MarineUnitBusinessRules"
            )
        return rules

    def get_supported_types(self) -> List[TransactionType]:
        return list(self._builders)
