# -*- coding: utf-8 -*-
"""
Tests for the cross-field / cross-step rule engine.
"""

import pytest

from models.form_field import CheckBox, DropDown, FileUpload, PaymentDetails, TextField
from models.validation_result import Invalid, Valid
from services.exceptions import RuleConfigurationError
from services.validation.cross_field_validator import CrossFieldValidator
from services.validation.validation_rules import (
    Comparison,
    ConditionalRequired,
    CrossStepValidation,
    CustomValidation,
    MultiFieldCondition,
    NumericComparison,
)


@pytest.fixture
def engine():
    return CrossFieldValidator()


def _fails_on(field_id, message):
    return CustomValidation(field_ids=[field_id], error_field_id=field_id, error_message=message,
                            logic=lambda fields: False)


class TestNumericComparison:
    """Numeric comparison between two text fields."""

    def _rule(self):
        return NumericComparison(
            field1_id="netTonnage",
            field2_id="grossTonnage",
            comparison=Comparison.LESS_THAN_OR_EQUAL,
            error_field_id="netTonnage",
            error_message="Net tonnage must be less than or equal to gross tonnage",
        )

    def test_holds(self):
        fields = [TextField(id="netTonnage", value="80"), TextField(id="grossTonnage", value="100")]
        assert self._rule().validate(fields) == Valid()

    def test_fails(self):
        fields = [TextField(id="netTonnage", value="120"), TextField(id="grossTonnage", value="100")]
        result = self._rule().validate(fields)
        assert isinstance(result, Invalid)
        assert result.field_id == "netTonnage"

    @pytest.mark.parametrize("net", ["", "abc"])
    def test_blank_or_unparseable_passes(self, net):
        fields = [TextField(id="netTonnage", value=net), TextField(id="grossTonnage", value="100")]
        assert self._rule().validate(fields).is_valid

    def test_missing_field_passes(self):
        assert self._rule().validate([TextField(id="netTonnage", value="120")]).is_valid

    def test_non_text_fields_pass(self):
        fields = [DropDown(id="netTonnage", value="120"), TextField(id="grossTonnage", value="100")]
        assert self._rule().validate(fields).is_valid


class TestConditionalRequired:

    def _rule(self):
        return ConditionalRequired(
            trigger_field_id="hasEngine",
            trigger_condition=lambda f: f.value == "true",
            required_field_id="engineType",
            error_message="Engine type is required",
        )

    def test_triggered_and_blank(self):
        fields = [CheckBox(id="hasEngine", checked=True), TextField(id="engineType")]
        assert self._rule().validate(fields) == Invalid("engineType", "Engine type is required")

    def test_not_triggered(self):
        fields = [CheckBox(id="hasEngine"), TextField(id="engineType")]
        assert self._rule().validate(fields).is_valid

    def test_non_text_required_field_never_blank(self):
        fields = [CheckBox(id="hasEngine", checked=True), FileUpload(id="engineType")]
        assert self._rule().validate(fields).is_valid


class TestMultiFieldCondition:

    def _rule(self, all_must_match=True):
        return MultiFieldCondition(
            conditions={
                "isCompany": lambda f: f.value == "true",
                "country": lambda f: f.value == "OM",
            },
            required_field_id="crNumber",
            error_message="CR number is required",
            all_must_match=all_must_match,
        )

    def test_all_match(self):
        fields = [CheckBox(id="isCompany", checked=True), DropDown(id="country", value="OM"), TextField(id="crNumber")]
        assert not self._rule().validate(fields).is_valid

    def test_partial_match(self):
        fields = [CheckBox(id="isCompany", checked=True), DropDown(id="country", value="AE"), TextField(id="crNumber")]
        assert self._rule().validate(fields).is_valid
        assert not self._rule(all_must_match=False).validate(fields).is_valid

    def test_missing_condition_field_not_met(self):
        fields = [CheckBox(id="isCompany", checked=True), TextField(id="crNumber")]
        assert self._rule().validate(fields).is_valid


class TestCustomValidation:

    def test_absent_field_skips_logic(self):
        calls = []
        rule = CustomValidation(field_ids=["a", "b"], error_field_id="a", error_message="x",
                                logic=lambda fields: calls.append(fields) or False)

        assert rule.validate([TextField(id="a")]).is_valid
        assert calls == []


class TestCrossStepValidation:
    """Rules reading the accumulated form data."""

    def _rule(self):
        return CrossStepValidation(
            trigger_field_id="overallLength",
            trigger_condition=lambda v: v is not None and float(v) <= 24,
            required_field_id="inspectionDocuments",
            error_field_id="inspectionDocuments",
            error_message="Inspection documents are required",
        )

    def test_same_step_validate_is_valid(self):
        assert self._rule().validate([]) == Valid()

    def test_triggered_and_missing(self):
        result = self._rule().validate_with_accumulated_data({"overallLength": "20"})
        assert result == Invalid("inspectionDocuments", "Inspection documents are required")

    def test_triggered_and_present(self):
        data = {"overallLength": "20", "inspectionDocuments": "cert.pdf"}
        assert self._rule().validate_with_accumulated_data(data).is_valid

    def test_not_triggered(self):
        assert self._rule().validate_with_accumulated_data({"overallLength": "30"}).is_valid


class TestCrossFieldValidator:
    """Engine ordering and error placement."""

    def test_last_failing_rule_wins(self, engine):
        fields = [TextField(id="height", value="90")]
        validated = engine.validate_with_rules(fields, [_fails_on("height", "first"), _fails_on("height", "second")])
        assert validated[0].error == "second"

    def test_cross_step_rules_skipped_in_same_step_pass(self, engine):
        rule = CrossStepValidation("a", lambda v: True, "b", "b", "missing b")
        validated = engine.validate_with_rules([TextField(id="b")], [rule])
        assert validated[0].error is None

    def test_accumulated_error_attached_to_current_field(self, engine):
        rule = CrossStepValidation("mortgageValue", lambda v: v == "5000", "bankName", "bankName", "Bank required")
        result = engine.validate_with_accumulated_data(
            [TextField(id="bankName")], {"mortgageValue": "5000"}, [rule]
        )

        assert not result.is_valid
        assert result.fields[0].error == "Bank required"
        assert result.unattached_errors == {}
        assert result.errors == {"bankName": "Bank required"}

    def test_error_outside_step_still_blocks(self, engine):
        rule = CrossStepValidation("overallLength", lambda v: True, "inspectionDocuments",
                                   "inspectionDocuments", "Documents required")
        result = engine.validate_with_accumulated_data([TextField(id="notes")], {"overallLength": "10"}, [rule])

        assert not result.is_valid
        assert result.unattached_errors == {"inspectionDocuments": "Documents required"}
        assert result.fields[0].error is None

    def test_payment_details_error_goes_to_value(self, engine):
        validated = engine.validate_with_rules(
            [PaymentDetails(id="payment", value="10")], [_fails_on("payment", "Payment rejected")]
        )
        assert validated[0].value == "Payment rejected"
        assert validated[0].error is None

    def test_payment_details_error_blocks_accumulated_pass(self, engine):
        result = engine.validate_with_accumulated_data(
            [PaymentDetails(id="payment", value="10")], {}, [_fails_on("payment", "Payment rejected")]
        )

        assert result.fields[0].value == "Payment rejected"
        assert not result.is_valid
        assert result.errors == {"payment": "Payment rejected"}

    def test_same_step_failure_on_missing_field_raises(self, engine):
        rule = NumericComparison(
            field1_id="overallLength",
            field2_id="overallWidth",
            comparison=Comparison.GREATER_THAN,
            error_field_id="ghostField",
            error_message="Length must exceed width",
        )
        fields = [TextField(id="overallLength", value="10"), TextField(id="overallWidth", value="12")]

        with pytest.raises(RuleConfigurationError, match="ghostField"):
            engine.validate_with_rules(fields, [rule])

    def test_same_step_rule_on_missing_field_passing_is_fine(self, engine):
        fields = [TextField(id="a", value="1")]
        rule = CustomValidation(field_ids=["a"], error_field_id="ghostField", error_message="x",
                                logic=lambda fields: True)
        assert engine.validate_with_rules(fields, [rule])[0].error is None

    def test_non_rule_raises(self, engine):
        with pytest.raises(RuleConfigurationError):
            engine.validate_with_rules([TextField(id="a")], ["not a rule"])
