"""HTTP client for the registration API.

The Streamlit pages never touch the record store directly; they go through
this client so the registration form and the admin dashboard behave exactly
like any other API consumer.  Every request carries a timeout, so a server
that never answers surfaces as an ``ApiClientError`` instead of hanging the
page.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from src.core.config import settings
from src.utils.exceptions import ApiClientError

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Registration failed. Please try again."


class RegistrationApiClient:
    """Client for the registration and admin endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session if session is not None else requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, Dict[str, Any]]:
        """
        Perform an HTTP request and decode the JSON envelope.

        Returns:
            Tuple of (status_code, body). Non-2xx responses are returned,
            not raised, so callers can read the server's message.

        Raises:
            ApiClientError: connection failure, timeout, or a body that is
                not a JSON object
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request to %s failed: %s", url, exc)
            raise ApiClientError(str(exc)) from exc

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("API returned non-JSON body (%s) for %s", response.status_code, url)
            raise ApiClientError(f"Invalid response from {url}") from exc

        if not isinstance(body, dict):
            raise ApiClientError(f"Unexpected response shape from {url}")

        return response.status_code, body

    def register(self, payload: Dict[str, Any]) -> Tuple[bool, str]:
        """
        Submit a registration.

        Args:
            payload: name, email, registration_type and optional company/phone

        Returns:
            Tuple of (success: bool, message: str)
            - (True, server message) on 2xx with success=true
            - (False, server message) on HTTP 400
            - (False, GENERIC_FAILURE_MESSAGE) on any other response

        Raises:
            ApiClientError: if the server could not be reached
        """
        status_code, body = self._request("POST", "/register", json_body=payload)

        if 200 <= status_code < 300 and body.get("success"):
            return True, body.get("message") or "Registration successful"

        if status_code == 400 and body.get("message"):
            return False, body["message"]

        logger.warning("Registration rejected with HTTP %s: %s", status_code, body.get("message"))
        return False, GENERIC_FAILURE_MESSAGE

    def get_stats(self) -> Dict[str, int]:
        """
        Fetch dashboard counts.

        Returns:
            {"total": int, "students": int, "professionals": int}

        Raises:
            ApiClientError: on transport failure or an unsuccessful response
        """
        status_code, body = self._request("GET", "/admin/stats")
        if status_code != 200 or not body.get("success"):
            raise ApiClientError(body.get("message") or f"HTTP {status_code}")
        return body["data"]

    def list_registrations(
        self,
        type_filter: str = "all",
        sort_order: str = "desc",
        search: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch registrations for the dashboard table.

        Raises:
            ApiClientError: on transport failure or an unsuccessful response
        """
        params: Dict[str, Any] = {"type": type_filter, "sort": sort_order}
        if search:
            params["search"] = search

        status_code, body = self._request("GET", "/admin/registrations", params=params)
        if status_code != 200 or not body.get("success"):
            raise ApiClientError(body.get("message") or f"HTTP {status_code}")
        return body["data"]
