# -*- coding: utf-8 -*-
"""
MTCIT API Client
================

Thin HTTP client for the marine unit and mortgage lookup endpoints used by
the eligibility checks. Authentication happens elsewhere; the caller hands
the client a bearer token.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    API connection settings.

    Values left as None are read from Config (which reads the .env file).
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class MtcitApiClient:
    """
    HTTP client over a shared ``requests.Session``.

    - HTTP error statuses raise ApiException
    - connection errors and timeouts raise NetworkException
    - no retries; the caller decides whether to ask again

    Usage:
        client = MtcitApiClient(ApiConfig(base_url="http://localhost:8080"))
        client.set_access_token(token)
        units = client.get_user_marine_units("user-1")
    """

    def __init__(self, config: Optional[ApiConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.session = session or requests.Session()
        self.access_token: Optional[str] = None

        if not self.config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def set_access_token(self, token: Optional[str]):
        """Set the bearer token from the authenticated user session."""
        self.access_token = token
        logger.debug("Access token updated externally")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request and translate failures.

        Returns:
            Decoded JSON body, or None for an empty body
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"[API REQ] {method} {endpoint} params={params}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except (ValueError, AttributeError):
                response_data = {}
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data if isinstance(response_data, dict) else {"data": response_data},
                context=endpoint
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(message=str(e), original_error=e, context=endpoint)

        logger.debug(f"[API RES] {response.status_code} {endpoint}")
        if not response.text:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiException(
                message=f"Invalid JSON response: {e}",
                status_code=response.status_code,
                context=endpoint
            )

    @staticmethod
    def _unwrap(result: Any) -> Any:
        """Accept both bare payloads and ``{"data": ...}`` envelopes."""
        if isinstance(result, dict) and "data" in result:
            return result["data"]
        return result

    # ==================== Marine units ====================

    def get_user_marine_units(self, user_id: str) -> List[Dict[str, Any]]:
        """Marine units owned by ``user_id``."""
        result = self._unwrap(self._request("GET", f"/api/v1/users/{user_id}/marine-units"))
        if result is None:
            return []
        if not isinstance(result, list):
            raise ApiException(
                message=f"Unexpected marine units payload: {json.dumps(result, default=str)[:200]}",
                context="get_user_marine_units"
            )
        return result

    def get_unit_status(self, unit_id: str) -> str:
        """ACTIVE, SUSPENDED or CANCELLED."""
        result = self._unwrap(self._request("GET", f"/api/v1/marine-units/{unit_id}/status"))
        if isinstance(result, dict):
            result = result.get("status")
        return str(result or "ACTIVE").upper()

    def get_registration_type(self, unit_id: str) -> str:
        """PERMANENT or TEMPORARY."""
        result = self._unwrap(self._request("GET", f"/api/v1/marine-units/{unit_id}/registration-type"))
        if isinstance(result, dict):
            result = result.get("registrationType") or result.get("type")
        return str(result or "PERMANENT").upper()

    def verify_ownership(self, unit_id: str, user_id: str) -> bool:
        result = self._unwrap(self._request(
            "GET", f"/api/v1/marine-units/{unit_id}/ownership", params={"userId": user_id}
        ))
        if isinstance(result, dict):
            result = result.get("isOwner", False)
        return bool(result)

    def get_inspection_status(self, unit_id: str) -> Dict[str, Any]:
        result = self._unwrap(self._request("GET", f"/api/v1/marine-units/{unit_id}/inspection-status"))
        return result or {"isInspected": False}

    # ==================== Mortgages ====================

    def get_mortgage_status(self, unit_id: str) -> Dict[str, Any]:
        result = self._unwrap(self._request("GET", f"/api/v1/marine-units/{unit_id}/mortgage-status"))
        return result or {"isMortgaged": False}

    def is_approved_bank(self, bank_id: str) -> bool:
        result = self._unwrap(self._request("GET", f"/api/v1/banks/{bank_id}/approved"))
        if isinstance(result, dict):
            result = result.get("isApproved", False)
        return bool(result)
