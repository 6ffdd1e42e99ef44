"""Authorization code exchange and profile error translation."""
import pytest

import workos_sso
from workos_sso.core.exceptions import APIError, ConfigurationError, DecodeError, InvalidArgumentError
from workos_sso.core.sso import PROFILE_ERROR_FALLBACK, check_and_raise_profile_error
from workos_sso.core.types import Profile
from workos_sso.config.settings import WorkOSConfig


PROFILE = {
    "id": "prof_1",
    "email": "a@b.com",
    "first_name": "A",
    "last_name": "B",
    "connection_type": "OktaSAML",
    "idp_id": "idp1",
    "access_token": "tok1",
}


class TestProfile:
    def test_returns_profile(self, sso, http, stub_response):
        http.queue(stub_response({"profile": PROFILE}))

        profile = sso.profile(code="code_123", project_id="project_1")

        assert profile == Profile(
            id="prof_1",
            email="a@b.com",
            first_name="A",
            last_name="B",
            connection_type="OktaSAML",
            idp_id="idp1",
            access_token="tok1",
        )

    def test_request_shape(self, sso, http, stub_response):
        http.queue(stub_response({"profile": PROFILE}))

        sso.profile(code="code_123", project_id="project_1")

        call = http.last_call
        assert call.url == "https://api.workos.com/sso/token"
        assert call.json == {
            "client_id": "project_1",
            "client_secret": "sk_test_123",
            "grant_type": "authorization_code",
            "code": "code_123",
        }
        assert "Authorization" not in call.headers

    def test_api_error_message_and_request_id(self, sso, http, stub_response):
        http.queue(
            stub_response({"message": "bad code"}, status_code=400, headers={"x-request-id": "req_123"})
        )

        with pytest.raises(APIError) as excinfo:
            sso.profile(code="expired", project_id="project_1")

        err = excinfo.value
        assert err.message == "bad code"
        assert err.request_id == "req_123"
        assert err.http_status is None

    def test_unparseable_body_uses_fallback(self, sso, http, stub_response):
        http.queue(stub_response(status_code=500, text="<html>Internal Server Error</html>"))

        with pytest.raises(APIError) as excinfo:
            sso.profile(code="code_123", project_id="project_1")

        assert excinfo.value.message == PROFILE_ERROR_FALLBACK
        assert excinfo.value.http_status is None

    def test_success_status_without_profile_is_an_error(self, sso, http, stub_response):
        http.queue(stub_response({"message": "No profile for code"}, status_code=200))

        with pytest.raises(APIError, match="No profile for code"):
            sso.profile(code="code_123", project_id="project_1")

    def test_malformed_profile_raises_decode_error(self, sso, http, stub_response):
        http.queue(stub_response({"profile": {"id": "prof_1"}}))

        with pytest.raises(DecodeError, match="missing required field 'email'"):
            sso.profile(code="code_123", project_id="project_1")

    def test_missing_api_key(self, http):
        sso = workos_sso.SSOService(workos_sso.WorkOSClient(WorkOSConfig()))

        with pytest.raises(ConfigurationError):
            sso.profile(code="code_123", project_id="project_1")

        assert http.calls == []

    @pytest.mark.parametrize("code, project_id", [("", "project_1"), ("code_123", None)])
    def test_required_arguments(self, sso, http, code, project_id):
        with pytest.raises(InvalidArgumentError):
            sso.profile(code=code, project_id=project_id)
        assert http.calls == []

    def test_module_function_reads_environment(self, monkeypatch, http, stub_response):
        monkeypatch.setenv("WORKOS_API_KEY", "sk_env")
        http.queue(stub_response({"profile": PROFILE}))

        profile = workos_sso.profile(code="code_123", project_id="project_1")

        assert profile.id == "prof_1"
        assert http.last_call.json["client_secret"] == "sk_env"


class TestCheckAndRaiseProfileError:
    def test_passes_with_profile(self, stub_response):
        assert check_and_raise_profile_error(stub_response({"profile": PROFILE})) is None

    @pytest.mark.parametrize(
        "payload, text, expected",
        [
            ({"message": "bad code"}, None, "bad code"),
            ({"error": "invalid_grant"}, None, PROFILE_ERROR_FALLBACK),
            ({"profile": None, "message": "expired"}, None, "expired"),
            (None, "not json", PROFILE_ERROR_FALLBACK),
            (None, "", PROFILE_ERROR_FALLBACK),
            (["profile"], None, PROFILE_ERROR_FALLBACK),
        ],
    )
    def test_failure_messages(self, stub_response, payload, text, expected):
        resp = stub_response(payload, status_code=400, text=text, headers={"x-request-id": "req_9"})

        with pytest.raises(APIError) as excinfo:
            check_and_raise_profile_error(resp)

        assert excinfo.value.message == expected
        assert excinfo.value.request_id == "req_9"
        assert excinfo.value.http_status is None
