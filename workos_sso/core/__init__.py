"""WorkOS SSO client library.

Module Structure:
    - client.py     : HTTP client with bearer authentication and error handling
    - exceptions.py : Typed exceptions (InvalidArgumentError, APIError, ...)
    - sso.py        : SSOService and module-level SSO functions
    - types.py      : Connection, Profile and Provider
    - validators.py : Argument validation run before any request

Usage:
    from workos_sso.config import WorkOSConfig
    from workos_sso.core.client import WorkOSClient
    from workos_sso.core.sso import SSOService

    sso = SSOService(WorkOSClient(WorkOSConfig(api_key="sk_test_123")))
    url = sso.authorization_url(
        project_id="project_01DG5TGK363GRVXP3ZS40WNGEZ",
        redirect_uri="https://example.com/callback",
        domain="acme.com",
    )
"""
from .exceptions import (
    WorkOSError,
    InvalidArgumentError,
    ConfigurationError,
    APIError,
    DecodeError,
)
from .types import (
    Provider,
    PROVIDERS,
    Connection,
    ConnectionDomain,
    Profile,
)
from .client import (
    WorkOSClient,
    SDK_VERSION,
    REQUEST_ID_HEADER,
)
from .sso import (
    SSOService,
    check_and_raise_profile_error,
    authorization_url,
    profile,
    promote_draft_connection,
    create_connection,
)

__all__ = [
    # Client
    "WorkOSClient",
    "SDK_VERSION",
    "REQUEST_ID_HEADER",

    # Exceptions
    "WorkOSError",
    "InvalidArgumentError",
    "ConfigurationError",
    "APIError",
    "DecodeError",

    # Types
    "Provider",
    "PROVIDERS",
    "Connection",
    "ConnectionDomain",
    "Profile",

    # SSO
    "SSOService",
    "check_and_raise_profile_error",
    "authorization_url",
    "profile",
    "promote_draft_connection",
    "create_connection",
]
