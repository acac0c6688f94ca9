from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from .settings import get_client_settings

logger = logging.getLogger(__name__)

RowId = Union[int, str]


class ApiError(Exception):
    """Raised for non-2xx responses and transport failures; `message` is shown to the user."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"API request failed with status: {response.status_code}"


class ApiClient:
    """
    Thin JSON client for the pharmacy REST API.

    Every call sends and expects JSON, carries a timeout and raises ApiError
    unless the server answered with a 2xx status.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_client_settings()
        self.base_url = (base_url or settings.PHARMACY_API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.PHARMACY_API_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(
            {"Content-Type": "application/json", "Accept": "application/json"}
        )

    # PUBLIC_INTERFACE
    def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        Parameters:
            method: HTTP verb
            endpoint: path below the base URL, e.g. "/products"
            data: JSON-serializable request body
            params: query string parameters
        Raises:
            ApiError: on a non-2xx status (with the server's message) or a transport failure
        """
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(
                method, url, json=data, params=params, timeout=self.timeout
            )
        except requests.exceptions.RequestException as exc:
            logger.error("Request %s %s failed: %s", method, url, exc)
            raise ApiError(f"Request failed: {exc}") from exc

        if not response.ok:
            message = _error_message(response)
            logger.error("%s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError("Invalid JSON in API response.", status_code=response.status_code) from exc

    def list(self, resource: str) -> List[Dict[str, Any]]:
        return self.request("GET", f"/{resource}") or []

    def get(self, resource: str, row_id: RowId) -> Dict[str, Any]:
        return self.request("GET", f"/{resource}", params={"id": row_id})

    def create(self, resource: str, values: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("POST", f"/{resource}", data=values)

    def update(self, resource: str, row_id: RowId, values: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("PUT", f"/{resource}", data=values, params={"id": row_id})

    def delete(self, resource: str, row_id: RowId) -> Dict[str, Any]:
        return self.request("DELETE", f"/{resource}", params={"id": row_id})

    def checkout(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Submit a cart payload (see Cart.to_payload) to the checkout endpoint."""
        return self.request("POST", "/sales/checkout", data=payload)
