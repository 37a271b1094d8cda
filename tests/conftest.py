# -*- coding: utf-8 -*-
"""
Shared fixtures for the wizard core tests.
"""
import os
import sys
import tempfile
from pathlib import Path

# Headless Qt and a throwaway log directory, before anything imports Config
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MTCIT_LOGS_DIR", tempfile.mkdtemp(prefix="mtcit-logs-"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from models.marine_unit import InspectionStatus, MarineUnit, MortgageStatus
from repositories.marine_unit_repository import MarineUnitRepository
from repositories.mortgage_repository import MortgageRepository
from services.translation_manager import get_language, set_language


class FakeMarineUnitRepository(MarineUnitRepository):
    """In-memory repository; lookups listed in ``failing`` raise the given error."""

    def __init__(self, units=None):
        self.units = list(units or [])
        self.owners = {}
        self.statuses = {}
        self.registration_types = {}
        self.inspections = {}
        self.failing = {}
        self.calls = []

    def _maybe_fail(self, name, unit_id):
        self.calls.append((name, unit_id))
        error = self.failing.get(unit_id)
        if error is not None:
            raise error

    def get_user_marine_units(self, user_id):
        return list(self.units)

    def get_unit_status(self, unit_id):
        self._maybe_fail("status", unit_id)
        return self.statuses.get(unit_id, "ACTIVE")

    def get_registration_type(self, unit_id):
        self._maybe_fail("registration_type", unit_id)
        return self.registration_types.get(unit_id, "PERMANENT")

    def verify_ownership(self, unit_id, user_id):
        self._maybe_fail("ownership", unit_id)
        return self.owners.get(unit_id, user_id) == user_id

    def get_inspection_status(self, unit_id):
        self._maybe_fail("inspection", unit_id)
        return self.inspections.get(unit_id, InspectionStatus(is_inspected=True, status="VALID"))


class FakeMortgageRepository(MortgageRepository):
    """In-memory mortgage records; units are free unless configured."""

    def __init__(self):
        self.statuses = {}
        self.approved_banks = set()

    def get_mortgage_status(self, unit_id):
        return self.statuses.get(unit_id, MortgageStatus(is_mortgaged=False))

    def is_approved_bank(self, bank_id):
        return bank_id in self.approved_banks


@pytest.fixture(autouse=True)
def english():
    """Run every test with English messages."""
    previous = get_language()
    set_language("en")
    yield
    set_language(previous)


@pytest.fixture
def unit():
    return MarineUnit(id="U1", ship_name="Al Bahar", imo_number="9123456", call_sign="A4B1")


@pytest.fixture
def second_unit():
    return MarineUnit(id="U2", ship_name="Sohar Star")


@pytest.fixture
def unit_repository(unit, second_unit):
    return FakeMarineUnitRepository([unit, second_unit])


@pytest.fixture
def mortgage_repository():
    return FakeMortgageRepository()
