# -*- coding: utf-8 -*-
"""
Navigation actions produced after a marine unit was checked.

The wizard core only produces these values; the hosting layer decides how to
present them (dialogs, compliance screens, redirects).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .marine_unit import MarineUnit
from .transaction_type import TransactionType


class IssueSeverity(Enum):
    BLOCKING = "blocking"  # cannot proceed
    WARNING = "warning"  # can proceed with caution
    INFO = "info"


@dataclass(frozen=True)
class ComplianceIssue:
    """A single compliance finding shown on the compliance detail screen."""

    category: str
    title: str
    description: str
    severity: IssueSeverity
    details: Dict[str, str] = field(default_factory=dict)


class MarineUnitNavigationAction:
    """Base of the closed action family."""


@dataclass(frozen=True)
class ErrorAction:
    """Follow-up offered from an error state."""

    label: str
    action: MarineUnitNavigationAction


@dataclass(frozen=True)
class ProceedToNextStep(MarineUnitNavigationAction):
    selected_unit: MarineUnit
    additional_data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class JumpToStep(MarineUnitNavigationAction):
    step_index: int
    reason: str = ""


@dataclass(frozen=True)
class ShowError(MarineUnitNavigationAction):
    title: str
    message: str
    actions: List[ErrorAction] = field(default_factory=list)


@dataclass(frozen=True)
class RedirectToTransaction(MarineUnitNavigationAction):
    transaction_type: TransactionType
    reason: str
    prefilled_data: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ShowConfirmation(MarineUnitNavigationAction):
    """Ask before running ``on_confirm``; confirmations do not nest."""

    message: str
    on_confirm: MarineUnitNavigationAction

    def __post_init__(self):
        if isinstance(self.on_confirm, ShowConfirmation):
            raise ValueError("ShowConfirmation cannot wrap another ShowConfirmation")
        if not isinstance(self.on_confirm, MarineUnitNavigationAction):
            raise TypeError(f"on_confirm must be a navigation action, got {type(self.on_confirm).__name__}")


@dataclass(frozen=True)
class ShowComplianceDetailScreen(MarineUnitNavigationAction):
    marine_unit: MarineUnit
    compliance_issues: List[ComplianceIssue]
    rejection_reason: str
    rejection_title: Optional[str] = None


@dataclass(frozen=True)
class RouteToConditionalStep(MarineUnitNavigationAction):
    selected_unit: MarineUnit
    target_step_index: int
    condition: str  # e.g. INSPECTED, NOT_INSPECTED
    condition_data: Dict[str, Any] = field(default_factory=dict)


ACTION_TYPES = (
    ProceedToNextStep,
    JumpToStep,
    ShowError,
    RedirectToTransaction,
    ShowConfirmation,
    ShowComplianceDetailScreen,
    RouteToConditionalStep,
)
