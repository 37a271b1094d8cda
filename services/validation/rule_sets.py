# -*- coding: utf-8 -*-
"""
Concrete rule sets for marine unit steps.

Each builder returns fresh rule instances with messages resolved in the
current language. Rules that need other steps' values read the accumulated
form data handed to the builder.
"""

from datetime import date, datetime
from typing import List, Mapping, Optional

from app.config import Config
from models.form_field import DatePicker, TextField
from services.translation_manager import tr

from .validation_rules import (
    Comparison,
    CrossStepValidation,
    CustomValidation,
    NumericComparison,
    ValidationRule,
    find_field,
    parse_float,
    parse_int,
)


def _text_value(fields, field_id: str) -> Optional[str]:
    field = find_field(fields, field_id)
    return field.value if isinstance(field, TextField) else None


def _date_value(fields, field_id: str) -> Optional[date]:
    field = find_field(fields, field_id)
    if not isinstance(field, DatePicker) or not field.value.strip():
        return None
    try:
        return datetime.strptime(field.value.strip(), Config.DATE_FORMAT).date()
    except ValueError:
        return None


# ==================== Dimensions ====================

def length_greater_than_width() -> ValidationRule:
    return NumericComparison(
        field1_id="overallLength",
        field2_id="overallWidth",
        comparison=Comparison.GREATER_THAN,
        error_field_id="overallWidth",
        error_message=tr("rules.dimensions.width_exceeds_length"),
    )


def max_height_for_tonnage(tonnage: float) -> float:
    if tonnage < 100:
        return 25.0
    if tonnage < 500:
        return 40.0
    if tonnage < 1000:
        return 50.0
    return 70.0


def max_decks_for_tonnage(tonnage: float) -> int:
    if tonnage < 100:
        return 2
    if tonnage < 500:
        return 4
    if tonnage < 1000:
        return 6
    if tonnage < 5000:
        return 8
    return 12


def height_validation() -> ValidationRule:
    def logic(fields):
        height = parse_float(_text_value(fields, "height"))
        tonnage = parse_float(_text_value(fields, "grossTonnage"))
        if height is None or tonnage is None:
            return True
        return height <= max_height_for_tonnage(tonnage)

    return CustomValidation(
        field_ids=["height", "grossTonnage"],
        error_field_id="height",
        error_message=tr("rules.dimensions.height_unusual"),
        logic=logic,
    )


def deck_count_validation() -> ValidationRule:
    def logic(fields):
        decks = parse_int(_text_value(fields, "decksCount"))
        tonnage = parse_float(_text_value(fields, "grossTonnage"))
        if decks is None or tonnage is None:
            return True
        return decks <= max_decks_for_tonnage(tonnage)

    return CustomValidation(
        field_ids=["decksCount", "grossTonnage"],
        error_field_id="decksCount",
        error_message=tr("rules.dimensions.decks_unusual"),
        logic=logic,
    )


def dimension_rules(form_data: Mapping[str, str] = None) -> List[ValidationRule]:
    return [
        length_greater_than_width(),
        height_validation(),
        deck_count_validation(),
    ]


# ==================== Dates ====================

def manufacturer_year_validation(current_year: Optional[int] = None) -> ValidationRule:
    min_year = Config.MIN_MANUFACTURER_YEAR

    def logic(fields):
        year = parse_int(_text_value(fields, "manufacturerYear"))
        if year is None:
            return True
        max_year = current_year if current_year is not None else date.today().year
        return min_year <= year <= max_year

    return CustomValidation(
        field_ids=["manufacturerYear"],
        error_field_id="manufacturerYear",
        error_message=tr("rules.dates.manufacturer_year", min_year=min_year),
        logic=logic,
    )


def construction_date_range() -> ValidationRule:
    def logic(fields):
        end = _date_value(fields, "constructionEndDate")
        start = _date_value(fields, "constructionStartDate")
        if end is None or start is None:
            return True
        return end > start

    return CustomValidation(
        field_ids=["constructionEndDate", "constructionStartDate"],
        error_field_id="constructionEndDate",
        error_message=tr("rules.dates.construction_range"),
        logic=logic,
    )


def registration_after_construction() -> ValidationRule:
    def logic(fields):
        registration = _date_value(fields, "firstRegistrationDate")
        construction = _date_value(fields, "constructionEndDate")
        if registration is None or construction is None:
            return True
        return registration > construction

    return CustomValidation(
        field_ids=["firstRegistrationDate", "constructionEndDate"],
        error_field_id="firstRegistrationDate",
        error_message=tr("rules.dates.registration_after_construction"),
        logic=logic,
    )


def date_rules(form_data: Mapping[str, str] = None) -> List[ValidationRule]:
    return [
        manufacturer_year_validation(),
        construction_date_range(),
        registration_after_construction(),
    ]


# ==================== Weights ====================

def _identifier_required_above(form_data: Mapping[str, str], identifier_id: str,
                               threshold: float, message_key: str) -> ValidationRule:
    def logic(fields):
        tonnage = parse_float(_text_value(fields, "grossTonnage"))
        if tonnage is None or tonnage <= threshold:
            return True
        identifier = form_data.get(identifier_id)
        return identifier is not None and bool(str(identifier).strip())

    return CustomValidation(
        field_ids=["grossTonnage"],
        error_field_id="grossTonnage",
        error_message=tr(message_key, tonnage=threshold),
        logic=logic,
    )


def imo_required_for_large_vessels(form_data: Mapping[str, str]) -> ValidationRule:
    """IMO number (entered on an earlier step) required above 500 GT."""
    return _identifier_required_above(
        form_data, "imoNumber", Config.IMO_REQUIRED_ABOVE_TONNAGE, "rules.weights.imo_required"
    )


def mmsi_required_for_medium_vessels(form_data: Mapping[str, str]) -> ValidationRule:
    """MMSI (entered on an earlier step) required above 300 GT."""
    return _identifier_required_above(
        form_data, "mmsi", Config.MMSI_REQUIRED_ABOVE_TONNAGE, "rules.weights.mmsi_required"
    )


def net_tonnage_within_gross() -> ValidationRule:
    return NumericComparison(
        field1_id="netTonnage",
        field2_id="grossTonnage",
        comparison=Comparison.LESS_THAN_OR_EQUAL,
        error_field_id="netTonnage",
        error_message=tr("rules.weights.net_tonnage"),
    )


def static_load_within_gross() -> ValidationRule:
    return NumericComparison(
        field1_id="staticLoad",
        field2_id="grossTonnage",
        comparison=Comparison.LESS_THAN_OR_EQUAL,
        error_field_id="staticLoad",
        error_message=tr("rules.weights.static_load"),
    )


def max_permitted_load_validation() -> ValidationRule:
    def logic(fields):
        max_load = parse_float(_text_value(fields, "maxPermittedLoad"))
        static_load = parse_float(_text_value(fields, "staticLoad"))
        if max_load is None or static_load is None:
            return True
        return max_load >= static_load

    return CustomValidation(
        field_ids=["maxPermittedLoad", "staticLoad"],
        error_field_id="maxPermittedLoad",
        error_message=tr("rules.weights.max_permitted_load"),
        logic=logic,
    )


def weight_rules(form_data: Mapping[str, str]) -> List[ValidationRule]:
    form_data = form_data or {}
    return [
        imo_required_for_large_vessels(form_data),
        mmsi_required_for_medium_vessels(form_data),
        net_tonnage_within_gross(),
        static_load_within_gross(),
        max_permitted_load_validation(),
    ]


# ==================== Documents ====================

def inspection_documents_for_short_vessels() -> ValidationRule:
    """Inspection documents are mandatory when overallLength <= 24 m."""
    max_length = Config.INSPECTION_DOCUMENT_MAX_LENGTH

    def is_short(length_value):
        length = parse_float(length_value)
        return length is not None and length <= max_length

    return CrossStepValidation(
        trigger_field_id="overallLength",
        trigger_condition=is_short,
        required_field_id="inspectionDocuments",
        error_field_id="inspectionDocuments",
        error_message=tr("rules.documents.inspection_required", length=max_length),
    )


def document_rules(form_data: Mapping[str, str] = None) -> List[ValidationRule]:
    return [inspection_documents_for_short_vessels()]


# ==================== Mortgage ====================

def bank_required_for_mortgage_value() -> ValidationRule:
    def has_value(mortgage_value):
        value = parse_float(mortgage_value)
        return value is not None and value > 0

    return CrossStepValidation(
        trigger_field_id="mortgageValue",
        trigger_condition=has_value,
        required_field_id="bankName",
        error_field_id="bankName",
        error_message=tr("rules.mortgage.bank_required"),
    )


def mortgage_rules(form_data: Mapping[str, str] = None) -> List[ValidationRule]:
    return [bank_required_for_mortgage_value()]
