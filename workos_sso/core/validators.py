"""Input validation helpers for SSO calls."""
from __future__ import annotations
from typing import Optional, Union

from .exceptions import InvalidArgumentError
from .types import PROVIDERS, Provider


def require_value(value: Optional[str], field: str) -> str:
    """Validate a required string argument.

    Args:
        value: Argument value
        field: Argument name for error messages (e.g., "project_id")

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If value is missing or empty
    """
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field} is required.")
    return value


def normalize_provider(provider: Union[Provider, str, None]) -> Optional[str]:
    """Return the provider as its string value, or None when not given.

    Raises:
        InvalidArgumentError: If provider is not a recognized value
    """
    if provider is None or provider == "":
        return None
    value = provider.value if isinstance(provider, Provider) else provider
    if value not in PROVIDERS:
        raise InvalidArgumentError(
            f"{value} is not a valid value. `provider` must be in {sorted(PROVIDERS)}"
        )
    return value


def validate_domain_and_provider(
    domain: Optional[str],
    provider: Union[Provider, str, None],
) -> Optional[str]:
    """Check that at least one of domain or provider is present.

    Both may be given. A given provider must be one of PROVIDERS.

    Returns:
        Normalized provider string, or None

    Raises:
        InvalidArgumentError: If both are absent or provider is unknown
    """
    if not domain and (provider is None or provider == ""):
        raise InvalidArgumentError("Either domain or provider is required.")
    return normalize_provider(provider)
