# -*- coding: utf-8 -*-
"""
Eligibility verdicts for a selected marine unit.

A verdict is either ``Eligible`` or one of the closed ``Ineligible``
variants. Reasons and suggestions are resolved through the translation
manager when read, so they follow the current language.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from services.translation_manager import tr

from .marine_unit import MarineUnit


class MarineUnitValidationResult:
    """Base of all eligibility verdicts."""

    unit: MarineUnit

    @property
    def is_eligible(self) -> bool:
        return isinstance(self, Eligible)


@dataclass(frozen=True)
class Eligible(MarineUnitValidationResult):
    unit: MarineUnit
    additional_data: Dict[str, Any] = field(default_factory=dict)


class Ineligible(MarineUnitValidationResult, ABC):
    """Base of the closed ineligibility family."""

    @property
    @abstractmethod
    def reason(self) -> str:
        pass

    @property
    def suggestion(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class NotOwned(Ineligible):
    unit: MarineUnit
    actual_owner: Optional[str] = None

    @property
    def reason(self) -> str:
        return tr("eligibility.not_owned.reason")

    @property
    def suggestion(self) -> Optional[str]:
        return tr("eligibility.not_owned.suggestion")


@dataclass(frozen=True)
class AlreadyMortgaged(Ineligible):
    unit: MarineUnit
    bank_name: str
    mortgage_end_date: str

    @property
    def reason(self) -> str:
        return tr("eligibility.already_mortgaged.reason", bank=self.bank_name)

    @property
    def suggestion(self) -> Optional[str]:
        return tr("eligibility.already_mortgaged.suggestion")


@dataclass(frozen=True)
class NotMortgaged(Ineligible):
    unit: MarineUnit

    @property
    def reason(self) -> str:
        return tr("eligibility.not_mortgaged.reason")

    @property
    def suggestion(self) -> Optional[str]:
        return tr("eligibility.not_mortgaged.suggestion")


@dataclass(frozen=True)
class TemporaryRegistration(Ineligible):
    unit: MarineUnit

    @property
    def reason(self) -> str:
        return tr("eligibility.temporary.reason")

    @property
    def suggestion(self) -> Optional[str]:
        return tr("eligibility.temporary.suggestion")


@dataclass(frozen=True)
class SuspendedOrCancelled(Ineligible):
    unit: MarineUnit
    status: str

    @property
    def reason(self) -> str:
        return tr("eligibility.suspended.reason", status=self.status)

    @property
    def suggestion(self) -> Optional[str]:
        return tr("eligibility.suspended.suggestion")


@dataclass(frozen=True)
class HasViolations(Ineligible):
    unit: MarineUnit
    violations_count: int

    @property
    def reason(self) -> str:
        return tr("eligibility.violations.reason", count=self.violations_count)

    @property
    def suggestion(self) -> Optional[str]:
        return tr("eligibility.violations.suggestion")


@dataclass(frozen=True)
class HasDetentions(Ineligible):
    unit: MarineUnit
    detentions_count: int

    @property
    def reason(self) -> str:
        return tr("eligibility.detentions.reason", count=self.detentions_count)

    @property
    def suggestion(self) -> Optional[str]:
        return tr("eligibility.detentions.suggestion")


@dataclass(frozen=True)
class CustomError(Ineligible):
    """Strategy-specific ineligibility with an already resolved text."""

    unit: MarineUnit
    custom_reason: str
    custom_suggestion: Optional[str] = None

    @property
    def reason(self) -> str:
        return self.custom_reason

    @property
    def suggestion(self) -> Optional[str]:
        return self.custom_suggestion


INELIGIBLE_TYPES = (
    NotOwned,
    AlreadyMortgaged,
    NotMortgaged,
    TemporaryRegistration,
    SuspendedOrCancelled,
    HasViolations,
    HasDetentions,
    CustomError,
)
