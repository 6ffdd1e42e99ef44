"""Pytest shared fixtures for the WorkOS SSO client."""
import json
import pathlib
import sys
from types import SimpleNamespace
from typing import Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from workos_sso.config import settings
from workos_sso.config.settings import WorkOSConfig
from workos_sso.core.client import WorkOSClient
from workos_sso.core.sso import SSOService


class StubResponse:
    """Minimal stand-in for requests.Response.

    When payload is None the body is parsed from text, so an invalid text
    makes json() raise like requests does.
    """

    def __init__(
        self,
        payload=None,
        status_code: int = 200,
        headers: Optional[dict] = None,
        text: Optional[str] = None,
    ):
        self._payload = payload
        self.status_code = status_code
        self.headers = headers or {}
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.reason = "OK" if 200 <= status_code < 300 else "Error"

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class HTTPStub:
    """Records outgoing requests and replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, response: StubResponse) -> None:
        self.responses.append(response)

    def post(self, url, **kwargs):
        self.calls.append(SimpleNamespace(method="POST", url=url, **kwargs))
        if not self.responses:
            raise RuntimeError(f"No stub response queued for POST {url}")
        return self.responses.pop(0)

    @property
    def last_call(self):
        return self.calls[-1]


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Block live HTTP and hide any WorkOS settings of the host."""

    def _unexpected(method):
        def _stub(url, *args, **kwargs):
            raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")
        return _stub

    monkeypatch.setattr(requests, "post", _unexpected("POST"))
    monkeypatch.setattr(requests, "get", _unexpected("GET"))

    for var in ("WORKOS_API_KEY", "WORKOS_API_HOSTNAME", "WORKOS_REQUEST_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)

    secrets_dir = tmp_path / "run-secrets"
    secrets_dir.mkdir()
    real_path = settings.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return secrets_dir
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    return secrets_dir


@pytest.fixture()
def secrets_dir(_isolate_environment):
    """Directory standing in for /run/secrets."""
    return _isolate_environment


@pytest.fixture()
def http(monkeypatch):
    """Stubbed requests.post that records calls."""
    stub = HTTPStub()
    monkeypatch.setattr(requests, "post", stub.post)
    return stub


@pytest.fixture()
def config():
    return WorkOSConfig(api_key="sk_test_123")


@pytest.fixture()
def sso(config):
    return SSOService(WorkOSClient(config))


@pytest.fixture()
def stub_response():
    """Factory for StubResponse objects."""
    return StubResponse
