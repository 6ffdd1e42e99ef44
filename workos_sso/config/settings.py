"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from workos_sso.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_HOSTNAME = "api.workos.com"
REQUEST_TIMEOUT = 10


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)
        else:
            if secret_value:
                logger.info("Loaded %s from /run/secrets", secret_name)
                return secret_value

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.info("Loaded %s from environment", env_var)
            return secret_value

    return None


@dataclass(frozen=True)
class WorkOSConfig:
    """Connection settings shared by every API call.

    Set once and read by every operation; never mutated after creation.
    """
    api_key: str = ""
    api_hostname: str = DEFAULT_API_HOSTNAME
    timeout: float = REQUEST_TIMEOUT

    @property
    def base_url(self) -> str:
        return f"https://{self.api_hostname}"

    @property
    def api_key_resolved(self) -> str:
        """Get the WorkOS API key with fallback.

        Priority:
        1. Configured value in api_key
        2. Docker secrets: /run/secrets/workos_api_key
        3. Environment variable: WORKOS_API_KEY

        Returns:
            API key string

        Raises:
            ConfigurationError: If no key is available
        """
        if self.api_key:
            return self.api_key

        secret = _load_secret_from_file("workos_api_key", "WORKOS_API_KEY")
        if secret:
            return secret

        raise ConfigurationError(
            "WORKOS_API_KEY not found. "
            "Pass api_key to WorkOSConfig or provide it via Docker secrets or environment variable."
        )


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw:
        return REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"WORKOS_REQUEST_TIMEOUT must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigurationError("WORKOS_REQUEST_TIMEOUT must be positive")
    return timeout


def load_settings() -> WorkOSConfig:
    """Load WorkOS settings from environment and /run/secrets.

    The API key is optional here; operations that need it fail with
    ConfigurationError when it is still unset.
    """
    api_key = _load_secret_from_file("workos_api_key", "WORKOS_API_KEY") or ""
    api_hostname = os.environ.get("WORKOS_API_HOSTNAME", "").strip() or DEFAULT_API_HOSTNAME
    timeout = _parse_timeout(os.environ.get("WORKOS_REQUEST_TIMEOUT", "").strip())

    logger.debug("WorkOS settings: host=%s timeout=%s key_set=%s", api_hostname, timeout, bool(api_key))

    return WorkOSConfig(api_key=api_key, api_hostname=api_hostname, timeout=timeout)
