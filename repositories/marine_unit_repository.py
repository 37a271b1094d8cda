# -*- coding: utf-8 -*-
"""
Marine unit repository: backend lookups about a user's marine units.
"""

from abc import ABC, abstractmethod
from typing import List

from models.marine_unit import InspectionStatus, MarineUnit
from services.api_client import MtcitApiClient
from utils.logger import get_logger

logger = get_logger(__name__)


class MarineUnitRepository(ABC):
    """
    Lookups used by the eligibility rules.

    Implementations raise ApiException / NetworkException when the backend
    cannot answer; they never guess a business answer.
    """

    @abstractmethod
    def get_user_marine_units(self, user_id: str) -> List[MarineUnit]:
        """Marine units belonging to ``user_id``."""

    @abstractmethod
    def get_unit_status(self, unit_id: str) -> str:
        """ACTIVE, SUSPENDED or CANCELLED."""

    @abstractmethod
    def get_registration_type(self, unit_id: str) -> str:
        """PERMANENT or TEMPORARY."""

    @abstractmethod
    def verify_ownership(self, unit_id: str, user_id: str) -> bool:
        pass

    @abstractmethod
    def get_inspection_status(self, unit_id: str) -> InspectionStatus:
        pass


class ApiMarineUnitRepository(MarineUnitRepository):
    """MarineUnitRepository backed by the MTCIT API."""

    def __init__(self, client: MtcitApiClient):
        self.client = client

    def get_user_marine_units(self, user_id: str) -> List[MarineUnit]:
        units = [MarineUnit.from_api_dict(item) for item in self.client.get_user_marine_units(user_id)]
        logger.debug(f"Loaded {len(units)} marine units for user {user_id}")
        return units

    def get_unit_status(self, unit_id: str) -> str:
        return self.client.get_unit_status(unit_id)

    def get_registration_type(self, unit_id: str) -> str:
        return self.client.get_registration_type(unit_id)

    def verify_ownership(self, unit_id: str, user_id: str) -> bool:
        return self.client.verify_ownership(unit_id, user_id)

    def get_inspection_status(self, unit_id: str) -> InspectionStatus:
        return InspectionStatus.from_api_dict(self.client.get_inspection_status(unit_id))
