# -*- coding: utf-8 -*-
"""
Tests for MtcitApiClient and the API repositories.

The HTTP layer is replaced with a mocked ``requests.Session``.
"""

from unittest.mock import MagicMock

import pytest
import requests

from repositories.marine_unit_repository import ApiMarineUnitRepository
from repositories.mortgage_repository import ApiMortgageRepository
from services.api_client import ApiConfig, MtcitApiClient
from services.exceptions import ApiException, NetworkException


def _response(payload=None, status=200, text=None):
    response = MagicMock()
    response.status_code = status
    response.text = text if text is not None else ("" if payload is None else "x")
    response.json.return_value = payload
    if status >= 400:
        error = requests.exceptions.HTTPError(f"{status} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    client = MtcitApiClient(ApiConfig(base_url="http://api.test/", timeout=7, verify_ssl=True), session=session)
    client.set_access_token("token-1")
    return client


class TestRequests:
    """Request construction and error translation."""

    def test_request_shape(self, client, session):
        session.request.return_value = _response({"data": {"status": "active"}})

        assert client.get_unit_status("U1") == "ACTIVE"

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://api.test/api/v1/marine-units/U1/status"
        assert kwargs["timeout"] == 7
        assert kwargs["headers"]["Authorization"] == "Bearer token-1"

    def test_http_error(self, client, session):
        session.request.return_value = _response({"title": "Not found"}, status=404)

        with pytest.raises(ApiException) as exc_info:
            client.get_unit_status("U1")

        assert exc_info.value.status_code == 404
        assert exc_info.value.response_data == {"title": "Not found"}
        assert exc_info.value.context == "/api/v1/marine-units/U1/status"

    def test_timeout(self, client, session):
        session.request.side_effect = requests.exceptions.Timeout("read timed out")
        with pytest.raises(NetworkException):
            client.verify_ownership("U1", "user-1")

    def test_connection_error(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(NetworkException):
            client.get_mortgage_status("U1")

    def test_invalid_json(self, client, session):
        response = _response(text="<html>")
        response.json.side_effect = ValueError("no json")
        session.request.return_value = response

        with pytest.raises(ApiException):
            client.get_inspection_status("U1")

    def test_no_token_no_authorization_header(self, session):
        session.request.return_value = _response({"isOwner": True})
        client = MtcitApiClient(ApiConfig(base_url="http://api.test"), session=session)

        assert client.verify_ownership("U1", "user-1") is True
        assert "Authorization" not in session.request.call_args.kwargs["headers"]
        assert session.request.call_args.kwargs["params"] == {"userId": "user-1"}


class TestPayloads:
    """Payload defaults and envelopes."""

    def test_units_list(self, client, session):
        session.request.return_value = _response({"data": [{"id": 1}, {"id": 2}]})
        assert client.get_user_marine_units("user-1") == [{"id": 1}, {"id": 2}]

    def test_units_unexpected_payload(self, client, session):
        session.request.return_value = _response({"data": {"id": 1}})
        with pytest.raises(ApiException):
            client.get_user_marine_units("user-1")

    def test_empty_body_defaults(self, client, session):
        session.request.return_value = _response(None)

        assert client.get_unit_status("U1") == "ACTIVE"
        assert client.get_registration_type("U1") == "PERMANENT"
        assert client.get_mortgage_status("U1") == {"isMortgaged": False}
        assert client.get_inspection_status("U1") == {"isInspected": False}

    def test_approved_bank(self, client, session):
        session.request.return_value = _response({"isApproved": True})
        assert client.is_approved_bank("B1") is True
        assert session.request.call_args.kwargs["url"] == "http://api.test/api/v1/banks/B1/approved"


class TestApiRepositories:
    """Repositories map payloads to models."""

    def test_marine_units(self, client, session):
        session.request.return_value = _response([{"id": 7, "shipName": "Al Bahar", "isTemp": "0"}])
        units = ApiMarineUnitRepository(client).get_user_marine_units("user-1")

        assert len(units) == 1
        assert units[0].id == "7"
        assert units[0].ship_name == "Al Bahar"

    def test_inspection_status(self, client, session):
        session.request.return_value = _response({"isInspected": True, "status": "VALID"})
        status = ApiMarineUnitRepository(client).get_inspection_status("U1")
        assert status.is_inspected and status.status == "VALID"

    def test_mortgage_status(self, client, session):
        session.request.return_value = _response({"isMortgaged": "true", "bankName": "Bank Muscat"})
        status = ApiMortgageRepository(client).get_mortgage_status("U1")
        assert status.is_mortgaged
        assert status.bank_name == "Bank Muscat"
