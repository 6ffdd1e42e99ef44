"""Typed representations of WorkOS SSO resources.

Resources are decoded from parsed JSON with ``from_dict`` and are immutable
afterwards. ``to_dict`` gives back the JSON-compatible representation.

Usage:
    connection = Connection.from_dict(response.json())
    connection.domains[0].domain
    'example.com'
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from .exceptions import DecodeError


class Provider(str, Enum):
    """Identity providers that can be selected when building an authorization URL."""

    GOOGLE = "Google"


PROVIDERS = frozenset(provider.value for provider in Provider)


def _require_str(payload: Dict[str, Any], key: str, resource: str) -> str:
    """Return payload[key], failing when it is absent or not a string."""
    if key not in payload:
        raise DecodeError(f"{resource} is missing required field '{key}'")
    value = payload[key]
    if not isinstance(value, str):
        raise DecodeError(
            f"{resource}.{key} must be a string, got {type(value).__name__}"
        )
    return value


def _require_object(payload: Any, resource: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise DecodeError(f"{resource} must be a JSON object, got {type(payload).__name__}")
    return payload


@dataclass(frozen=True)
class ConnectionDomain:
    """A domain attached to an SSO connection."""

    id: str
    domain: str
    object: str = "connection_domain"

    @classmethod
    def from_dict(cls, payload: Any) -> "ConnectionDomain":
        data = _require_object(payload, "ConnectionDomain")
        obj = data.get("object", "connection_domain")
        if not isinstance(obj, str):
            raise DecodeError("ConnectionDomain.object must be a string")
        return cls(
            id=_require_str(data, "id", "ConnectionDomain"),
            domain=_require_str(data, "domain", "ConnectionDomain"),
            object=obj,
        )

    def to_dict(self) -> Dict[str, str]:
        return {"object": self.object, "id": self.id, "domain": self.domain}


@dataclass(frozen=True)
class Connection:
    """An SSO connection configured for a WorkOS project.

    Instances are built by the SDK from API responses; they are not meant
    to be constructed by callers.
    """

    id: str
    name: str
    connection_type: str
    domains: Tuple[ConnectionDomain, ...] = ()

    @classmethod
    def from_dict(cls, payload: Any) -> "Connection":
        """Decode a connection resource.

        Args:
            payload: Parsed JSON object returned by the API

        Returns:
            Connection instance

        Raises:
            DecodeError: If a required field is absent or has the wrong type
        """
        data = _require_object(payload, "Connection")
        raw_domains = data.get("domains", [])
        if not isinstance(raw_domains, list):
            raise DecodeError(
                f"Connection.domains must be a list, got {type(raw_domains).__name__}"
            )
        return cls(
            id=_require_str(data, "id", "Connection"),
            name=_require_str(data, "name", "Connection"),
            connection_type=_require_str(data, "connection_type", "Connection"),
            domains=tuple(ConnectionDomain.from_dict(item) for item in raw_domains),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "connection_type": self.connection_type,
            "domains": [domain.to_dict() for domain in self.domains],
        }


PROFILE_FIELDS = (
    "id",
    "email",
    "first_name",
    "last_name",
    "connection_type",
    "idp_id",
    "access_token",
)


@dataclass(frozen=True)
class Profile:
    """Identity of a user who completed an SSO login."""

    id: str
    email: str
    first_name: str
    last_name: str
    connection_type: str
    idp_id: str
    access_token: str

    @classmethod
    def from_dict(cls, payload: Any) -> "Profile":
        """Decode the ``profile`` member of a token exchange response.

        Raises:
            DecodeError: If a required field is absent or has the wrong type
        """
        data = _require_object(payload, "Profile")
        return cls(**{key: _require_str(data, key, "Profile") for key in PROFILE_FIELDS})

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in PROFILE_FIELDS}
