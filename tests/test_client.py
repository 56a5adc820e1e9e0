"""Tests for the Client facade."""

import httpx
import pytest

from scalr_client import Client, ClientConfig, CredentialNotFoundError
from scalr_client.resources import Environments, ProviderConfigurationDefaults, Workspaces
from scalr_client.testing import TEST_HOSTNAME, TEST_TOKEN, MockAPI, list_document


class TestClientConstruction:
    @pytest.mark.unit
    def test_explicit_settings(self):
        with Client("example.scalr.io", "token", retry_max=2, timeout=5) as scalr:
            assert scalr.config.base_url == "https://example.scalr.io/api/iacp/v3/"
            assert scalr.http.retry_max == 2
            assert scalr.http.timeout == 5
            assert isinstance(scalr.environments, Environments)
            assert isinstance(scalr.workspaces, Workspaces)
            assert isinstance(scalr.provider_configuration_defaults, ProviderConfigurationDefaults)

    @pytest.mark.unit
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SCALR_HOSTNAME", "env.scalr.io")
        monkeypatch.setenv("SCALR_TOKEN", "env-token")
        monkeypatch.setenv("SCALR_RETRY_SERVER_ERRORS", "true")

        with Client.from_env() as scalr:
            assert scalr.config.hostname == "env.scalr.io"
            assert scalr.config.token == "env-token"
            assert scalr.http.retry_server_errors is True

    @pytest.mark.unit
    def test_missing_credentials(self):
        with pytest.raises(CredentialNotFoundError):
            Client()

    @pytest.mark.unit
    def test_config_object(self):
        config = ClientConfig(hostname="example.scalr.io", token="token", retry_max=1)

        with Client(config=config) as scalr:
            assert scalr.config is config
            assert scalr.http.retry_max == 1

    @pytest.mark.unit
    @pytest.mark.parametrize("extra", [{"hostname": "other.scalr.io"}, {"token": "t"}, {"retry_max": 3}])
    def test_config_and_settings_conflict(self, extra):
        config = ClientConfig(hostname="example.scalr.io", token="token")

        with pytest.raises(TypeError, match="either config or individual settings"):
            Client(config=config, **extra)


class TestClientRequests:
    @pytest.mark.unit
    def test_requests_carry_token_and_app_user_agent(self):
        api = MockAPI()
        api.add("GET", "environments", json=list_document([]))

        with api.client(app_name="terraform-provider-scalr", app_version="3.0.0") as scalr:
            scalr.environments.list()

        request = api.calls[0]
        assert request.url.host == TEST_HOSTNAME
        assert request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert request.headers["User-Agent"].startswith("terraform-provider-scalr/3.0.0 scalr-client/")

    @pytest.mark.unit
    def test_custom_headers_and_transport(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        with Client(
            TEST_HOSTNAME, TEST_TOKEN, transport=httpx.MockTransport(handler), headers={"Prefer": "profile=preview"}
        ) as scalr:
            scalr.workspaces.list()

        assert seen[0].headers["Prefer"] == "profile=preview"
        assert seen[0].url.path == "/api/iacp/v3/workspaces"

    @pytest.mark.unit
    def test_close_closes_http_client(self):
        scalr = Client(TEST_HOSTNAME, TEST_TOKEN)

        scalr.close()

        assert scalr.http._client.is_closed
