# -*- coding: utf-8 -*-
"""
Wizard Context - State of one transaction wizard session.

Provides unified interface for:
- Accumulated form data across steps
- Step completion tracking
- Serialization/deserialization
- Reference number generation
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from datetime import datetime
import uuid

from models.transaction_type import TransactionType

STATUS_DRAFT = "draft"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"
STATUS_CANCELLED = "cancelled"


class WizardContext:
    """
    Context of a wizard session.

    ``form_data`` accumulates the values of every step in entry order.
    Validators never receive it directly: they get ``snapshot()``, an
    immutable copy taken at call time.
    """

    def __init__(self, transaction_type: Optional[TransactionType] = None, user_id: Optional[str] = None):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = STATUS_DRAFT
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step_index: int = 0
        self.transaction_type: Optional[TransactionType] = transaction_type
        self.user_id: Optional[str] = user_id
        self.reference_number: str = self._generate_reference_number()

        # Step completion tracking
        self.completed_steps: set = set()

        # Accumulated values of all steps, keyed by field id
        self.form_data: Dict[str, str] = {}

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: MTC-20260118153045-A3F2
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"MTC-{timestamp}-{short_id}"

    @property
    def is_abandoned(self) -> bool:
        return self.status == STATUS_CANCELLED

    def mark_step_completed(self, step_index: int):
        """Mark a step as completed."""
        self.completed_steps.add(step_index)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_index: int) -> bool:
        """Check if a step is completed."""
        return step_index in self.completed_steps

    def update_field(self, field_id: str, value: Any):
        """Store a field value (string encoded)."""
        if isinstance(value, bool):
            value = "true" if value else "false"
        self.form_data[field_id] = "" if value is None else str(value)
        self.updated_at = datetime.now()
        if self.status == STATUS_DRAFT:
            self.status = STATUS_IN_PROGRESS

    def update_fields(self, values: Mapping[str, Any]):
        for field_id, value in values.items():
            self.update_field(field_id, value)

    def get_value(self, field_id: str, default: str = "") -> str:
        return self.form_data.get(field_id, default)

    def snapshot(self) -> Mapping[str, str]:
        """Read-only copy of the accumulated data."""
        return MappingProxyType(dict(self.form_data))

    def abandon(self):
        """Cancel the session; late asynchronous results must be discarded."""
        self.status = STATUS_CANCELLED
        self.updated_at = datetime.now()

    def complete(self):
        self.status = STATUS_COMPLETED
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "transaction_type": self.transaction_type.name if self.transaction_type else None,
            "user_id": self.user_id,
            "completed_steps": sorted(self.completed_steps),
            "form_data": dict(self.form_data),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardContext':
        """Restore context from dictionary."""
        transaction_name = data.get("transaction_type")
        context = cls(
            transaction_type=TransactionType.from_name(transaction_name) if transaction_name else None,
            user_id=data.get("user_id"),
        )
        context.wizard_id = data.get("wizard_id", context.wizard_id)
        context.reference_number = data.get("reference_number", context.reference_number)
        context.status = data.get("status", STATUS_DRAFT)
        context.current_step_index = data.get("current_step_index", 0)
        context.completed_steps = set(data.get("completed_steps", []))
        context.form_data = dict(data.get("form_data", {}))

        # Parse datetime strings
        if "created_at" in data:
            context.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            context.updated_at = datetime.fromisoformat(data["updated_at"])
        return context
