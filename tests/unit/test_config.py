"""Tests for ClientConfig resolution from arguments and the environment."""

import pytest

from scalr_client.auth import CredentialNotFoundError, CredentialResolver
from scalr_client.config import ClientConfig, ConfigurationError


@pytest.fixture
def resolver():
    return CredentialResolver(load_dotenv=False)


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("SCALR_HOSTNAME", "example.scalr.io")
    monkeypatch.setenv("SCALR_TOKEN", "env-token")


class TestResolve:
    @pytest.mark.unit
    def test_from_arguments(self, resolver):
        config = ClientConfig.resolve("example.scalr.io", "token", resolver=resolver)

        assert config.hostname == "example.scalr.io"
        assert config.token == "token"
        assert config.retry_max == 5
        assert config.retry_server_errors is False
        assert config.timeout == 30.0

    @pytest.mark.unit
    def test_from_environment(self, resolver, credentials, monkeypatch):
        monkeypatch.setenv("SCALR_RETRY_MAX", "2")
        monkeypatch.setenv("SCALR_RETRY_SERVER_ERRORS", "Yes")
        monkeypatch.setenv("SCALR_TIMEOUT", "7.5")

        config = ClientConfig.resolve(resolver=resolver)

        assert config == ClientConfig(
            hostname="example.scalr.io",
            token="env-token",
            retry_max=2,
            retry_server_errors=True,
            timeout=7.5,
        )

    @pytest.mark.unit
    def test_arguments_override_environment(self, resolver, credentials, monkeypatch):
        monkeypatch.setenv("SCALR_RETRY_MAX", "2")

        config = ClientConfig.resolve("other.scalr.io", "arg-token", retry_max=0, resolver=resolver)

        assert config.hostname == "other.scalr.io"
        assert config.token == "arg-token"
        assert config.retry_max == 0

    @pytest.mark.unit
    def test_token_file(self, resolver, tmp_path, monkeypatch):
        token_file = tmp_path / "token"
        token_file.write_text("file-token\n")
        monkeypatch.setenv("SCALR_HOSTNAME", "example.scalr.io")
        monkeypatch.setenv("SCALR_TOKEN_FILE", str(token_file))

        assert ClientConfig.resolve(resolver=resolver).token == "file-token"

    @pytest.mark.unit
    def test_token_variable_wins_over_file(self, resolver, credentials, tmp_path, monkeypatch):
        token_file = tmp_path / "token"
        token_file.write_text("file-token")
        monkeypatch.setenv("SCALR_TOKEN_FILE", str(token_file))

        assert ClientConfig.resolve(resolver=resolver).token == "env-token"

    @pytest.mark.unit
    def test_missing_hostname(self, resolver):
        with pytest.raises(CredentialNotFoundError, match="SCALR_HOSTNAME"):
            ClientConfig.resolve(token="token", resolver=resolver)

    @pytest.mark.unit
    def test_missing_token(self, resolver):
        with pytest.raises(CredentialNotFoundError) as exc_info:
            ClientConfig.resolve("example.scalr.io", resolver=resolver)

        assert exc_info.value.env_var_name == "SCALR_TOKEN"
        assert "SCALR_TOKEN_FILE" in str(exc_info.value)

    @pytest.mark.unit
    def test_dotenv_file_in_working_directory(self, isolated_cwd):
        (isolated_cwd / ".env").write_text("SCALR_HOSTNAME=dotenv.scalr.io\nSCALR_TOKEN=dotenv-token\n")

        config = ClientConfig.resolve()

        assert config.hostname == "dotenv.scalr.io"
        assert config.token == "dotenv-token"


class TestMalformedSettings:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "raw", "message"),
        [
            ("SCALR_RETRY_MAX", "x", "SCALR_RETRY_MAX must be an integer, got 'x'"),
            ("SCALR_TIMEOUT", "soon", "SCALR_TIMEOUT must be a number"),
            ("SCALR_RETRY_SERVER_ERRORS", "maybe", "SCALR_RETRY_SERVER_ERRORS must be a boolean"),
        ],
    )
    def test_bad_environment_values(self, resolver, credentials, monkeypatch, name, raw, message):
        monkeypatch.setenv(name, raw)

        with pytest.raises(ConfigurationError, match=message):
            ClientConfig.resolve(resolver=resolver)

    @pytest.mark.unit
    def test_blank_numbers_fall_back_to_defaults(self, resolver, credentials, monkeypatch):
        monkeypatch.setenv("SCALR_RETRY_MAX", " ")
        monkeypatch.setenv("SCALR_TIMEOUT", "")
        monkeypatch.setenv("SCALR_RETRY_SERVER_ERRORS", "")

        config = ClientConfig.resolve(resolver=resolver)

        assert (config.retry_max, config.timeout, config.retry_server_errors) == (5, 30.0, False)

    @pytest.mark.unit
    def test_negative_retry_max(self, resolver, credentials):
        with pytest.raises(ConfigurationError, match="retry_max must not be negative"):
            ClientConfig.resolve(retry_max=-1, resolver=resolver)

    @pytest.mark.unit
    def test_non_positive_timeout(self, resolver, credentials):
        with pytest.raises(ConfigurationError, match="timeout must be positive"):
            ClientConfig.resolve(timeout=0, resolver=resolver)

    @pytest.mark.unit
    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestBaseURL:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("hostname", "expected"),
        [
            ("example.scalr.io", "https://example.scalr.io/api/iacp/v3/"),
            ("example.scalr.io/", "https://example.scalr.io/api/iacp/v3/"),
            ("http://localhost:8080", "http://localhost:8080/api/iacp/v3/"),
        ],
    )
    def test_base_url(self, hostname, expected):
        assert ClientConfig(hostname=hostname, token="t").base_url == expected
