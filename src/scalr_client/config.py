"""Client configuration.

``ClientConfig.resolve`` merges explicit arguments with the ``SCALR_*``
environment variables (and a ``.env`` file) through ``CredentialResolver``.

| Variable | Meaning |
|---|---|
| ``SCALR_HOSTNAME`` | API host, e.g. ``example.scalr.io`` |
| ``SCALR_TOKEN`` | bearer token |
| ``SCALR_TOKEN_FILE`` | file holding the token, used when ``SCALR_TOKEN`` is unset |
| ``SCALR_RETRY_MAX`` | retries after the first attempt (default 5) |
| ``SCALR_RETRY_SERVER_ERRORS`` | also retry 5xx responses (default false) |
| ``SCALR_TIMEOUT`` | request timeout in seconds (default 30) |
"""

import logging
from dataclasses import dataclass

from scalr_client.auth import CredentialResolver

logger = logging.getLogger(__name__)

DEFAULT_RETRY_MAX = 5
DEFAULT_TIMEOUT = 30.0
BASE_PATH = "/api/iacp/v3/"

_TRUE = frozenset(["1", "true", "yes", "on"])
_FALSE = frozenset(["0", "false", "no", "off", ""])


class ConfigurationError(ValueError):
    """A configuration value could not be interpreted."""


@dataclass(frozen=True)
class ClientConfig:
    hostname: str
    token: str
    retry_max: int = DEFAULT_RETRY_MAX
    retry_server_errors: bool = False
    timeout: float = DEFAULT_TIMEOUT
    app_name: str | None = None
    app_version: str | None = None

    @property
    def base_url(self) -> str:
        """``https://<hostname>/api/iacp/v3/``; a scheme in ``hostname`` is kept."""
        host = self.hostname.rstrip("/")
        if "://" not in host:
            host = f"https://{host}"
        return f"{host}{BASE_PATH}"

    @classmethod
    def resolve(
        cls,
        hostname: str | None = None,
        token: str | None = None,
        *,
        retry_max: int | None = None,
        retry_server_errors: bool | None = None,
        timeout: float | None = None,
        app_name: str | None = None,
        app_version: str | None = None,
        resolver: CredentialResolver | None = None,
    ) -> "ClientConfig":
        """Build a config from arguments, falling back to the environment.

        Raises:
            CredentialNotFoundError: No hostname or no token could be found.
            ConfigurationError: A numeric or boolean variable is malformed.
        """
        resolver = resolver or CredentialResolver()

        resolved_hostname = resolver.hostname(hostname)
        resolved_token = resolver.token(token)

        if retry_max is None:
            retry_max = _parse_int(
                "SCALR_RETRY_MAX",
                resolver.resolve(env_var_name="SCALR_RETRY_MAX", mask_in_logs=False),
                DEFAULT_RETRY_MAX,
            )
        if retry_server_errors is None:
            retry_server_errors = _parse_bool(
                "SCALR_RETRY_SERVER_ERRORS",
                resolver.resolve(env_var_name="SCALR_RETRY_SERVER_ERRORS", mask_in_logs=False),
            )
        if timeout is None:
            timeout = _parse_float(
                "SCALR_TIMEOUT",
                resolver.resolve(env_var_name="SCALR_TIMEOUT", mask_in_logs=False),
                DEFAULT_TIMEOUT,
            )

        if retry_max < 0:
            raise ConfigurationError(f"retry_max must not be negative, got {retry_max}")
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout}")

        config = cls(
            hostname=resolved_hostname,
            token=resolved_token,
            retry_max=retry_max,
            retry_server_errors=retry_server_errors,
            timeout=timeout,
            app_name=app_name,
            app_version=app_version,
        )
        logger.debug(
            f"Resolved client config for {config.hostname} "
            f"(retry_max={config.retry_max}, retry_server_errors={config.retry_server_errors}, "
            f"timeout={config.timeout})"
        )
        return config


def _parse_int(name: str, raw: str | None, default: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _parse_float(name: str, raw: str | None, default: float) -> float:
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def _parse_bool(name: str, raw: str | None) -> bool:
    if raw is None:
        return False
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")
