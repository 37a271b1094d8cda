# -*- coding: utf-8 -*-
"""
Tests for the form field and step models.
"""

import pytest

from models.form_field import (
    FIELD_TYPES,
    CheckBox,
    DropDown,
    MultiSelectDropDown,
    PaymentDetails,
    PhoneNumberField,
    RadioGroup,
    TextField,
)
from models.step import StepDescriptor, StepType


class TestFieldCopies:
    """Fields are immutable; copies carry the changes."""

    def test_copy_with_value_clears_error(self):
        field = TextField(id="shipName", value="old", error="bad")
        updated = field.copy_with_value("new")

        assert updated.value == "new"
        assert updated.error is None
        assert field.value == "old"
        assert field.error == "bad"

    def test_copy_with_error_keeps_value(self):
        field = TextField(id="shipName", value="Al Bahar")
        updated = field.copy_with_error("Too long")

        assert updated.value == "Al Bahar"
        assert updated.error == "Too long"
        assert updated.has_error

    def test_dropdown_copy_tracks_selected_option(self):
        field = DropDown(id="port", options=("Muscat", "Sohar"))
        updated = field.copy_with_value("Sohar")

        assert updated.value == "Sohar"
        assert updated.selected_option == "Sohar"

    def test_radio_copy_tracks_selected_value(self):
        field = RadioGroup(id="personType")
        assert field.copy_with_value("company").selected_value == "company"

    def test_phone_country_code(self):
        field = PhoneNumberField(id="mobile")
        assert field.selected_country_code == "+968"
        assert field.copy_with_country_code("+971").selected_country_code == "+971"

    def test_frozen(self):
        field = TextField(id="shipName")
        with pytest.raises(AttributeError):
            field.value = "x"


class TestCheckBox:
    """Checkbox value mirrors its checked state."""

    def test_value_follows_checked(self):
        assert CheckBox(id="terms").value == "false"
        assert CheckBox(id="terms", checked=True).value == "true"

    def test_copy_with_value(self):
        field = CheckBox(id="terms").copy_with_value("true")
        assert field.checked is True
        assert field.value == "true"

        assert field.copy_with_value("yes").checked is False


class TestPaymentDetails:
    """Payment details keep their error text in the value slot."""

    def test_error_stored_in_value(self):
        field = PaymentDetails(id="payment", value="120.000")
        updated = field.copy_with_error("Payment failed")

        assert updated.value == "Payment failed"
        assert updated.error is None

    def test_clearing_error_is_a_no_op(self):
        field = PaymentDetails(id="payment", value="120.000")
        assert field.copy_with_error(None) is field


class TestFieldFamily:

    def test_closed_variant_set(self):
        assert len(FIELD_TYPES) == 16
        assert MultiSelectDropDown in FIELD_TYPES

    def test_list_defaults_are_empty_json_arrays(self):
        assert MultiSelectDropDown(id="activities").value == "[]"

    def test_field_kind(self):
        assert TextField(id="a").field_kind == "TextField"


class TestStepDescriptor:
    """Step descriptor invariants."""

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            StepDescriptor(title="Dimensions", fields=[TextField(id="a"), TextField(id="a")])

    def test_fields_kept_in_order(self):
        step = StepDescriptor(
            title="Dimensions",
            fields=[TextField(id="overallLength", mandatory=True), TextField(id="overallWidth")],
            step_type=StepType.SHIP_DIMENSIONS,
        )

        assert step.field_ids == ("overallLength", "overallWidth")
        assert [f.id for f in step.mandatory_fields] == ["overallLength"]
        assert step.get_field("overallWidth").id == "overallWidth"
        assert step.get_field("missing") is None

    def test_with_fields(self):
        step = StepDescriptor(title="Dimensions", fields=[TextField(id="a")], step_type=StepType.SHIP_DIMENSIONS)
        updated = step.with_fields([TextField(id="a", value="1")])

        assert updated.fields[0].value == "1"
        assert updated.step_type is StepType.SHIP_DIMENSIONS
        assert step.fields[0].value == ""
