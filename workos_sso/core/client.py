"""Low-level HTTP client for the WorkOS API.

Handles authentication headers, request dispatch and translation of failed
responses into APIError.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from workos_sso.config.settings import WorkOSConfig, load_settings
from .exceptions import APIError, DecodeError

logger = logging.getLogger(__name__)

SDK_VERSION = "0.1.0"
USER_AGENT = f"workos-sso-python/{SDK_VERSION}"
REQUEST_ID_HEADER = "x-request-id"


def is_success(resp: requests.Response) -> bool:
    """Return True for a 2xx status."""
    return 200 <= resp.status_code < 300


def request_id_of(resp: requests.Response) -> Optional[str]:
    headers = getattr(resp, "headers", None) or {}
    return headers.get(REQUEST_ID_HEADER)


def decode_json(resp: requests.Response) -> Any:
    """Parse a response body as JSON.

    Raises:
        DecodeError: If the body is not valid JSON
    """
    try:
        return resp.json()
    except ValueError:
        raise DecodeError(
            "Response body is not valid JSON",
            request_id=request_id_of(resp),
        ) from None


class WorkOSClient:
    """HTTP client for the WorkOS API.

    Features:
    - Bearer authentication with the configured API key
    - Centralized error handling
    - Unchecked requests for calls that inspect the status themselves

    Usage:
        client = WorkOSClient(WorkOSConfig(api_key="sk_test_123"))
        response = client.post("/connections", json={"source": "draft_conn_1"})
    """

    def __init__(self, config: Optional[WorkOSConfig] = None):
        """Initialize WorkOS client.

        Args:
            config: Connection settings (defaults to load_settings())
        """
        self.config = config or load_settings()

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    def _headers(self, auth: bool) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        if auth:
            headers["Authorization"] = f"Bearer {self.config.api_key_resolved}"
        return headers

    def post(
        self,
        path: str,
        json: Optional[Dict] = None,
        auth: bool = True,
        check: bool = True,
    ) -> requests.Response:
        """Execute POST request.

        Args:
            path: API endpoint path
            json: JSON payload
            auth: Send the API key as a bearer token
            check: Raise APIError on a non-2xx status

        Returns:
            Response object

        Raises:
            APIError: On HTTP error when check is True
            ConfigurationError: If auth is requested and no API key is set
        """
        url = f"{self.base_url}{path}"
        headers = self._headers(auth)

        resp = requests.post(
            url,
            json=json,
            headers=headers,
            timeout=self.config.timeout,
            allow_redirects=False,
        )
        self._log_response("POST", path, resp)
        if check:
            self._handle_error(resp)
        return resp

    def _log_response(self, method: str, path: str, resp: requests.Response) -> None:
        logger.debug(
            "%s %s -> %s (request_id=%s)",
            method,
            path,
            resp.status_code,
            request_id_of(resp),
        )

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Args:
            resp: Response object to check

        Raises:
            APIError: If response status is outside the 2xx class
        """
        if is_success(resp):
            return

        message = None
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("error_description") or body.get("error")
        if not message:
            message = resp.text or getattr(resp, "reason", None) or "Request failed"

        request_id = request_id_of(resp)
        logger.warning("WorkOS API error %s (request_id=%s)", resp.status_code, request_id)
        raise APIError(str(message), http_status=resp.status_code, request_id=request_id)
