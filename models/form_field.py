# -*- coding: utf-8 -*-
"""
Form field model.

Every input a wizard step shows is one of the immutable ``FormField``
variants below. Values are string encoded (lists as JSON arrays, checkboxes
as ``"true"``/``"false"``); ``error`` is ``None`` while the field is valid.
"""

from dataclasses import dataclass, replace
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class RadioOption:
    """A single choice of a RadioGroup."""

    value: str
    label: str = ""
    description: Optional[str] = None
    is_enabled: bool = True


@dataclass(frozen=True)
class PaymentLineItem:
    """A single line of a payment breakdown."""

    name: str
    amount: float = 0.0


@dataclass(frozen=True)
class FormField:
    """
    Base of the closed field family.

    Subclasses only add display attributes; validation lives in
    services.validation.field_validator.
    """

    id: str
    label: str = ""
    value: str = ""
    error: Optional[str] = None
    mandatory: bool = False

    # Variants without a conventional error slot keep the error text in value
    stores_error_in_value: ClassVar[bool] = False

    @property
    def field_kind(self) -> str:
        """Stable variant name (used in logs and dispatch tables)."""
        return type(self).__name__

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def copy_with_value(self, new_value: str) -> "FormField":
        """Return a copy holding ``new_value`` with the error cleared."""
        return replace(self, value=new_value, error=None)

    def copy_with_error(self, new_error: Optional[str]) -> "FormField":
        """Return a copy carrying ``new_error`` (``None`` clears it)."""
        if self.stores_error_in_value:
            if new_error is None:
                return self
            return replace(self, value=new_error)
        return replace(self, error=new_error)


@dataclass(frozen=True)
class TextField(FormField):
    is_password: bool = False
    is_numeric: bool = False
    is_decimal: bool = False
    placeholder: Optional[str] = None
    enabled: bool = True
    max_length: Optional[int] = None
    min_length: Optional[int] = None


@dataclass(frozen=True)
class DropDown(FormField):
    options: Tuple[str, ...] = ()
    selected_option: Optional[str] = None
    placeholder: Optional[str] = None

    def copy_with_value(self, new_value: str) -> "DropDown":
        return replace(self, value=new_value, selected_option=new_value, error=None)


@dataclass(frozen=True)
class CheckBox(FormField):
    """Checkbox; ``value`` always mirrors ``checked``."""

    value: str = "false"
    checked: bool = False

    def __post_init__(self):
        object.__setattr__(self, "value", "true" if self.checked else "false")

    def copy_with_value(self, new_value: str) -> "CheckBox":
        return replace(self, checked=(new_value == "true"), error=None)


@dataclass(frozen=True)
class DatePicker(FormField):
    allow_past_dates: bool = True


@dataclass(frozen=True)
class FileUpload(FormField):
    allowed_types: Tuple[str, ...] = (
        "pdf", "jpg", "jpeg", "png", "doc", "docx", "xls", "xlsx", "txt",
    )
    max_size_mb: int = 5
    selected_files: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OwnerList(FormField):
    value: str = "[]"
    nationalities: Tuple[str, ...] = ()
    countries: Tuple[str, ...] = ()
    include_company_fields: bool = True
    total_count_field_id: Optional[str] = None


@dataclass(frozen=True)
class EngineList(FormField):
    value: str = "[]"
    engine_types: Tuple[str, ...] = ()
    manufacturers: Tuple[str, ...] = ()
    fuel_types: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SailorList(FormField):
    value: str = "[]"
    jobs: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SelectableList(FormField):
    options: Tuple = ()
    selected_option: Optional[object] = None


@dataclass(frozen=True)
class MarineUnitSelector(FormField):
    value: str = "[]"  # JSON array of selected unit ids
    units: Tuple = ()
    allow_multiple_selection: bool = False
    show_add_new_button: bool = True


@dataclass(frozen=True)
class RadioGroup(FormField):
    options: Tuple[RadioOption, ...] = ()
    selected_value: Optional[str] = None

    def copy_with_value(self, new_value: str) -> "RadioGroup":
        return replace(self, value=new_value, selected_value=new_value, error=None)


@dataclass(frozen=True)
class InfoCard(FormField):
    items: Tuple[str, ...] = ()
    show_checkmarks: bool = True


@dataclass(frozen=True)
class PhoneNumberField(FormField):
    country_codes: Tuple[str, ...] = ("+968", "+966", "+971", "+974", "+965", "+973")
    selected_country_code: str = "+968"

    def copy_with_country_code(self, new_code: str) -> "PhoneNumberField":
        return replace(self, selected_country_code=new_code)


@dataclass(frozen=True)
class OTPField(FormField):
    phone_number: str = ""
    otp_length: int = 6


@dataclass(frozen=True)
class MultiSelectDropDown(FormField):
    value: str = "[]"
    options: Tuple[str, ...] = ()
    selected_options: Tuple[str, ...] = ()
    max_selection: Optional[int] = None


@dataclass(frozen=True)
class PaymentDetails(FormField):
    """Display-only payment breakdown."""

    stores_error_in_value: ClassVar[bool] = True

    line_items: Tuple[PaymentLineItem, ...] = ()
    total_cost: float = 0.0
    total_tax: float = 0.0
    final_total: float = 0.0


# Closed variant set; validators register one handler per entry
FIELD_TYPES = (
    TextField,
    DropDown,
    CheckBox,
    DatePicker,
    FileUpload,
    OwnerList,
    EngineList,
    SailorList,
    SelectableList,
    MarineUnitSelector,
    RadioGroup,
    InfoCard,
    PhoneNumberField,
    OTPField,
    MultiSelectDropDown,
    PaymentDetails,
)
