# -*- coding: utf-8 -*-
"""
Tests for error mapping and translations.
"""

import pytest

from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, UnsupportedFieldError, ValidationException
from services.translation_manager import get_language, is_rtl, set_language, tr
from services.translations.ar import AR_TRANSLATIONS
from services.translations.en import EN_TRANSLATIONS


class TestErrorMapper:
    """Exceptions become localized user messages."""

    @pytest.mark.parametrize("status, expected", [
        (401, "Unauthorized. Please login again."),
        (403, "Access forbidden."),
        (500, "The service is temporarily unavailable. Please try again later."),
        (404, "Connection error. Please check your internet connection."),
    ])
    def test_api_statuses(self, status, expected):
        assert map_exception(ApiException("x", status_code=status)) == expected

    def test_context_filled_in(self):
        error = ApiException("x", status_code=400, response_data={"errors": {"imo": ["invalid"]}})
        map_exception(error, context="lookup")
        assert error.context == "lookup"

    def test_timeout(self):
        error = NetworkException("x", original_error=TimeoutError("Read timed out"))
        assert map_exception(error) == "Connection timeout. Please try again."

    def test_validation(self):
        message = map_exception(ValidationException("x", errors=["bad"]))
        assert message == "The submitted data was rejected. Please review the form."

    def test_unknown(self):
        assert map_exception(RuntimeError("x")) == "Connection error. Please check your internet connection."

    def test_unsupported_field_message(self):
        class Field:
            id = "hull"

        assert "hull" in str(UnsupportedFieldError(Field()))


class TestTranslations:
    """Translation manager and catalogs."""

    def test_catalogs_have_same_keys(self):
        assert set(AR_TRANSLATIONS) == set(EN_TRANSLATIONS)

    def test_placeholders(self):
        assert tr("validation.field.required", label="Ship name") == "Ship name is required"

    def test_unknown_key_returns_key(self):
        assert tr("no.such.key") == "no.such.key"

    def test_language_switch(self):
        set_language("ar")
        assert get_language() == "ar"
        assert is_rtl()
        assert tr("button.retry") != "Retry"

        set_language("en")
        assert not is_rtl()

    def test_unsupported_language_falls_back_to_arabic(self):
        set_language("fr")
        assert get_language() == "ar"
