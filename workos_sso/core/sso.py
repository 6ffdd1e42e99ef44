"""WorkOS SSO operations.

Build authorization URLs, exchange authorization codes for profiles and
manage connections. You need a valid API key, a project ID, and an SSO
connection created on the WorkOS dashboard.

See https://docs.workos.com/sso/overview
"""
from __future__ import annotations
import logging
from typing import Optional, Union
from urllib.parse import quote, urlencode

import requests

from workos_sso.config.settings import WorkOSConfig, load_settings
from .client import WorkOSClient, decode_json, is_success, request_id_of
from .exceptions import APIError
from .types import Connection, Profile, Provider
from .validators import require_value, validate_domain_and_provider

logger = logging.getLogger(__name__)

PROFILE_ERROR_FALLBACK = "Something went wrong"


def check_and_raise_profile_error(response: requests.Response) -> None:
    """Raise APIError unless a token exchange response carries a profile.

    The error never reports an HTTP status, only the body's message and the
    x-request-id header. Unparseable bodies get a generic message.

    Raises:
        APIError: If the body has no profile object
    """
    request_id = request_id_of(response)
    message = None
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        if body.get("profile"):
            return
        message = body.get("message")

    logger.warning("Profile exchange failed (request_id=%s)", request_id)
    raise APIError(
        message=message or PROFILE_ERROR_FALLBACK,
        http_status=None,
        request_id=request_id,
    )


class SSOService:
    """Service for WorkOS SSO operations."""

    def __init__(self, client: WorkOSClient):
        """Initialize SSO service.

        Args:
            client: WorkOS client holding the API key and hostname
        """
        self.client = client

    def authorization_url(
        self,
        project_id: str,
        redirect_uri: str,
        domain: Optional[str] = None,
        provider: Union[Provider, str, None] = None,
        state: Optional[str] = None,
    ) -> str:
        """Generate an OAuth2 authorization URL for the configured Identity Provider.

        No request is sent; the URL is meant for a browser redirect.

        Args:
            project_id: WorkOS project ID where the SSO connection is configured
            redirect_uri: Where users land after authenticating. Must match a
                redirect URI configured on the WorkOS dashboard
            domain: Domain of the SSO connection. One of domain or provider is required
            provider: Identity provider name, see Provider
            state: Opaque value echoed back in the redirect

        Returns:
            Authorization URL

        Raises:
            InvalidArgumentError: If required arguments are missing or provider is unknown

        Example:
            >>> service.authorization_url(
            ...     project_id="project_01DG5TGK363GRVXP3ZS40WNGEZ",
            ...     redirect_uri="https://workos.com/callback",
            ...     domain="acme.com",
            ... )
            'https://api.workos.com/sso/authorize?client_id=project_01DG5TGK363GRVXP3ZS40WNGEZ&redirect_uri=https%3A%2F%2Fworkos.com%2Fcallback&response_type=code&domain=acme.com'
        """
        require_value(project_id, "project_id")
        require_value(redirect_uri, "redirect_uri")
        provider_value = validate_domain_and_provider(domain, provider)

        params = {
            "client_id": project_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "state": state,
            "domain": domain,
            "provider": provider_value,
        }
        query = urlencode({key: value for key, value in params.items() if value})

        return f"{self.client.base_url}/sso/authorize?{query}"

    def profile(self, code: str, project_id: str) -> Profile:
        """Fetch the profile of the user who completed SSO.

        Args:
            code: Authorization code from the callback URL
            project_id: WorkOS project ID where the SSO connection is configured

        Returns:
            Profile of the authenticated user

        Raises:
            InvalidArgumentError: If code or project_id is missing
            ConfigurationError: If no API key is configured
            APIError: If the response carries no profile
        """
        require_value(code, "code")
        require_value(project_id, "project_id")

        body = {
            "client_id": project_id,
            "client_secret": self.client.config.api_key_resolved,
            "grant_type": "authorization_code",
            "code": code,
        }
        response = self.client.post("/sso/token", json=body, auth=False, check=False)
        check_and_raise_profile_error(response)

        return Profile.from_dict(decode_json(response)["profile"])

    def promote_draft_connection(self, token: str) -> bool:
        """Promote a draft connection created via the WorkOS.js embed.

        Unlike the other operations this does not raise on an API failure;
        the return value is the only failure signal.

        Args:
            token: Draft connection token provided by WorkOS.js

        Returns:
            True if the API answered with a 2xx status, False otherwise

        Raises:
            InvalidArgumentError: If token is missing
            ConfigurationError: If no API key is configured
        """
        require_value(token, "token")

        response = self.client.post(
            f"/draft_connections/{quote(token, safe='')}/activate",
            check=False,
        )
        if not is_success(response):
            logger.info(
                "Draft connection activation returned %s (request_id=%s)",
                response.status_code,
                request_id_of(response),
            )
            return False
        return True

    def create_connection(self, source: str) -> Connection:
        """Create a connection from a draft connection token.

        Args:
            source: Draft connection token provided by WorkOS.js

        Returns:
            The created connection

        Raises:
            InvalidArgumentError: If source is missing
            ConfigurationError: If no API key is configured
            APIError: On a non-2xx response, with its status code
            DecodeError: If the response body is not a valid connection
        """
        require_value(source, "source")

        response = self.client.post("/connections", json={"source": source})
        return Connection.from_dict(decode_json(response))


# ─────────────────────────────────────────────────────────────────────────────
# Module-level functions reading process-wide settings
# ─────────────────────────────────────────────────────────────────────────────
def _service(config: Optional[WorkOSConfig] = None) -> SSOService:
    return SSOService(WorkOSClient(config or load_settings()))


def authorization_url(
    project_id: str,
    redirect_uri: str,
    domain: Optional[str] = None,
    provider: Union[Provider, str, None] = None,
    state: Optional[str] = None,
    config: Optional[WorkOSConfig] = None,
) -> str:
    """Build an authorization URL. See SSOService.authorization_url."""
    return _service(config).authorization_url(
        project_id=project_id,
        redirect_uri=redirect_uri,
        domain=domain,
        provider=provider,
        state=state,
    )


def profile(code: str, project_id: str, config: Optional[WorkOSConfig] = None) -> Profile:
    """Exchange an authorization code for a profile. See SSOService.profile."""
    return _service(config).profile(code=code, project_id=project_id)


def promote_draft_connection(token: str, config: Optional[WorkOSConfig] = None) -> bool:
    """Promote a draft connection. See SSOService.promote_draft_connection."""
    return _service(config).promote_draft_connection(token=token)


def create_connection(source: str, config: Optional[WorkOSConfig] = None) -> Connection:
    """Create a connection. See SSOService.create_connection."""
    return _service(config).create_connection(source=source)
