"""Configuration module for the WorkOS SSO client."""
from .settings import WorkOSConfig, load_settings

__all__ = ["WorkOSConfig", "load_settings"]
