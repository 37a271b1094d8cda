# -*- coding: utf-8 -*-
"""
Tests for the marine unit rule sets and the validation factory.
"""

import pytest

from models.form_field import DatePicker, TextField
from models.step import StepDescriptor, StepType
from services.exceptions import RuleConfigurationError
from services.validation import rule_sets
from services.validation.cross_field_validator import CrossFieldValidator
from services.validation.validation_factory import ValidationFactory
from services.validation.validation_rules import CrossStepValidation


def _text(**values):
    return [TextField(id=field_id, value=value) for field_id, value in values.items()]


class TestDimensionRules:

    def test_width_exceeding_length(self):
        result = rule_sets.length_greater_than_width().validate(_text(overallLength="20", overallWidth="25"))
        assert result.field_id == "overallWidth"
        assert result.error == "Width cannot exceed length"

    @pytest.mark.parametrize("tonnage, height, valid", [
        ("50", "25", True),
        ("50", "26", False),
        ("400", "40", True),
        ("800", "51", False),
        ("2000", "70", True),
    ])
    def test_height_by_tonnage(self, tonnage, height, valid):
        result = rule_sets.height_validation().validate(_text(height=height, grossTonnage=tonnage))
        assert result.is_valid is valid

    @pytest.mark.parametrize("tonnage, decks, valid", [
        ("50", "2", True),
        ("50", "3", False),
        ("4000", "8", True),
        ("6000", "13", False),
    ])
    def test_decks_by_tonnage(self, tonnage, decks, valid):
        result = rule_sets.deck_count_validation().validate(_text(decksCount=decks, grossTonnage=tonnage))
        assert result.is_valid is valid

    def test_missing_values_pass(self):
        assert rule_sets.height_validation().validate(_text(height="", grossTonnage="50")).is_valid


class TestDateRules:

    def test_manufacturer_year_range(self):
        rule = rule_sets.manufacturer_year_validation(current_year=2025)
        assert rule.validate(_text(manufacturerYear="1990")).is_valid
        assert not rule.validate(_text(manufacturerYear="1899")).is_valid
        assert not rule.validate(_text(manufacturerYear="2026")).is_valid

    def test_construction_range(self):
        rule = rule_sets.construction_date_range()
        fields = [
            DatePicker(id="constructionStartDate", value="2020-05-01"),
            DatePicker(id="constructionEndDate", value="2020-04-01"),
        ]
        result = rule.validate(fields)
        assert result.field_id == "constructionEndDate"

    def test_registration_after_construction(self):
        rule = rule_sets.registration_after_construction()
        fields = [
            DatePicker(id="firstRegistrationDate", value="2021-01-01"),
            DatePicker(id="constructionEndDate", value="2020-12-31"),
        ]
        assert rule.validate(fields).is_valid


class TestWeightRules:

    def test_imo_required_above_500(self):
        rule = rule_sets.imo_required_for_large_vessels({})
        result = rule.validate(_text(grossTonnage="600"))

        assert result.field_id == "grossTonnage"
        assert result.error.startswith("IMO number is required for vessels over 500 gross tonnage")

    def test_imo_present_in_earlier_step(self):
        rule = rule_sets.imo_required_for_large_vessels({"imoNumber": "9123456"})
        assert rule.validate(_text(grossTonnage="600")).is_valid

    def test_mmsi_required_above_300(self):
        rule = rule_sets.mmsi_required_for_medium_vessels({"mmsi": "  "})
        assert not rule.validate(_text(grossTonnage="301")).is_valid
        assert rule.validate(_text(grossTonnage="300")).is_valid

    def test_weight_rules_order_last_writer_wins(self):
        # Both identifier rules fail on grossTonnage; the MMSI message is kept
        fields = _text(grossTonnage="800", netTonnage="", staticLoad="", maxPermittedLoad="")
        validated = CrossFieldValidator().validate_with_rules(fields, rule_sets.weight_rules({}))

        assert validated[0].error.startswith("MMSI number is required")

    def test_max_permitted_load(self):
        rule = rule_sets.max_permitted_load_validation()
        assert not rule.validate(_text(maxPermittedLoad="10", staticLoad="20")).is_valid


class TestCrossStepRules:

    def test_inspection_documents_for_short_vessels(self):
        rule = rule_sets.inspection_documents_for_short_vessels()

        assert isinstance(rule, CrossStepValidation)
        assert not rule.validate_with_accumulated_data({"overallLength": "24"}).is_valid
        assert rule.validate_with_accumulated_data({"overallLength": "24.5"}).is_valid
        assert rule.validate_with_accumulated_data({"overallLength": "abc"}).is_valid

    def test_bank_required_for_mortgage_value(self):
        rule = rule_sets.bank_required_for_mortgage_value()

        result = rule.validate_with_accumulated_data({"mortgageValue": "15000"})
        assert result.field_id == "bankName"
        assert rule.validate_with_accumulated_data({"mortgageValue": "0"}).is_valid


class TestValidationFactory:
    """Registry of rule sets by step type."""

    def test_default_registrations(self):
        factory = ValidationFactory()
        assert set(factory.get_registered_types()) == {
            StepType.SHIP_DIMENSIONS,
            StepType.MARINE_UNIT_DATA,
            StepType.SHIP_WEIGHTS,
            StepType.DOCUMENTS,
            StepType.MORTGAGE_DATA,
        }

    def test_unregistered_type_has_no_rules(self):
        assert ValidationFactory().get_rules(StepType.REVIEW) == []

    def test_rules_for_step(self):
        step = StepDescriptor(title="Weights", step_type=StepType.SHIP_WEIGHTS)
        assert len(ValidationFactory().rules_for_step(step, {})) == 5

    def test_register_custom_builder(self):
        factory = ValidationFactory()
        factory.register_builder(StepType.REVIEW, lambda data: [rule_sets.length_greater_than_width()])
        assert len(factory.get_rules(StepType.REVIEW)) == 1

    def test_bad_builder_output(self):
        factory = ValidationFactory()
        factory.register_builder(StepType.REVIEW, lambda data: ["nope"])
        with pytest.raises(RuleConfigurationError):
            factory.get_rules(StepType.REVIEW)

    def test_bad_step_type(self):
        with pytest.raises(RuleConfigurationError):
            ValidationFactory().register_builder("review", lambda data: [])
