# -*- coding: utf-8 -*-
"""
Wizard step descriptor.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .form_field import FormField


class StepType(Enum):
    """Kind of a wizard step; selects the cross-field rule set."""

    PERSON_TYPE = "person_type"
    COMMERCIAL_REGISTRATION = "commercial_registration"
    MARINE_UNIT_SELECTION = "marine_unit_selection"
    MARINE_UNIT_DATA = "marine_unit_data"
    CREW_MANAGEMENT = "crew_management"
    SHIP_DIMENSIONS = "ship_dimensions"
    SHIP_WEIGHTS = "ship_weights"
    OWNER_INFO = "owner_info"
    DOCUMENTS = "documents"
    MORTGAGE_DATA = "mortgage_data"
    REVIEW = "review"
    PAYMENT = "payment"
    CUSTOM = "custom"


@dataclass(frozen=True)
class StepDescriptor:
    """One step of a transaction wizard: a title and its ordered fields."""

    title: str
    fields: Tuple[FormField, ...] = ()
    description: str = ""
    step_type: StepType = StepType.CUSTOM

    def __post_init__(self):
        fields = tuple(self.fields)
        object.__setattr__(self, "fields", fields)

        seen = set()
        for field in fields:
            if field.id in seen:
                raise ValueError(f"Duplicate field id '{field.id}' in step '{self.title}'")
            seen.add(field.id)

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return tuple(f.id for f in self.fields)

    @property
    def mandatory_fields(self) -> Tuple[FormField, ...]:
        return tuple(f for f in self.fields if f.mandatory)

    def get_field(self, field_id: str) -> Optional[FormField]:
        for field in self.fields:
            if field.id == field_id:
                return field
        return None

    def with_fields(self, fields) -> "StepDescriptor":
        """Return a copy of this step holding ``fields``."""
        return StepDescriptor(
            title=self.title,
            fields=tuple(fields),
            description=self.description,
            step_type=self.step_type,
        )
