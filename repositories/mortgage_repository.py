# -*- coding: utf-8 -*-
"""
Mortgage repository.
"""

from abc import ABC, abstractmethod

from models.marine_unit import MortgageStatus
from services.api_client import MtcitApiClient
from utils.logger import get_logger

logger = get_logger(__name__)


class MortgageRepository(ABC):
    """Mortgage lookups for a marine unit."""

    @abstractmethod
    def get_mortgage_status(self, unit_id: str) -> MortgageStatus:
        pass

    @abstractmethod
    def is_approved_bank(self, bank_id: str) -> bool:
        pass


class ApiMortgageRepository(MortgageRepository):
    """MortgageRepository backed by the MTCIT API."""

    def __init__(self, client: MtcitApiClient):
        self.client = client

    def get_mortgage_status(self, unit_id: str) -> MortgageStatus:
        status = MortgageStatus.from_api_dict(self.client.get_mortgage_status(unit_id))
        logger.debug(f"Mortgage status for {unit_id}: mortgaged={status.is_mortgaged}")
        return status

    def is_approved_bank(self, bank_id: str) -> bool:
        return self.client.is_approved_bank(bank_id)
