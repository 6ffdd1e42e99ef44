"""WorkOS SSO client.

Quick start:
    import workos_sso

    sso = workos_sso.SSOService(workos_sso.WorkOSClient(workos_sso.WorkOSConfig(api_key="sk_test_123")))
    profile = sso.profile(code=request.args["code"], project_id="project_01DG5TGK363GRVXP3ZS40WNGEZ")

Settings can also come from the environment (WORKOS_API_KEY,
WORKOS_API_HOSTNAME, WORKOS_REQUEST_TIMEOUT) through load_settings().
"""
# core is imported first: config.settings depends on core.exceptions
from .core import SDK_VERSION as __version__
from .core.client import WorkOSClient
from .core.exceptions import (
    WorkOSError,
    InvalidArgumentError,
    ConfigurationError,
    APIError,
    DecodeError,
)
from .core.sso import (
    SSOService,
    authorization_url,
    profile,
    promote_draft_connection,
    create_connection,
)
from .core.types import Connection, ConnectionDomain, Profile, Provider, PROVIDERS
from .config.settings import WorkOSConfig, load_settings

__all__ = [
    "__version__",

    # Configuration
    "WorkOSConfig",
    "load_settings",

    # Client
    "WorkOSClient",

    # Exceptions
    "WorkOSError",
    "InvalidArgumentError",
    "ConfigurationError",
    "APIError",
    "DecodeError",

    # SSO
    "SSOService",
    "authorization_url",
    "profile",
    "promote_draft_connection",
    "create_connection",

    # Types
    "Connection",
    "ConnectionDomain",
    "Profile",
    "Provider",
    "PROVIDERS",
]
