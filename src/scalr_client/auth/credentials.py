"""Find the Scalr hostname and API token.

Each setting is looked up in code first, then in the environment (a ``.env``
file is merged into the environment beforehand by python-dotenv), then in its
default. The token may also live in a file named by ``SCALR_TOKEN_FILE``,
which is how CI systems usually mount secrets.

Example:
    ```python
    from scalr_client.auth import CredentialResolver

    resolver = CredentialResolver()
    hostname = resolver.hostname()
    token = resolver.token()
    ```

Only the source of a secret is logged, never its value.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

from scalr_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

HOSTNAME_ENV = "SCALR_HOSTNAME"
TOKEN_ENV = "SCALR_TOKEN"
TOKEN_FILE_ENV = "SCALR_TOKEN_FILE"

_MASK = "***"


class CredentialResolver:
    """Settings lookup over code, environment, ``.env`` and defaults.

    Variables already set in the process environment win over the ``.env``
    file. The file is merged at most once per resolver.
    """

    def __init__(self, dotenv_path: str | Path | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._dotenv_lock = Lock()
        self._dotenv_loaded = False
        if load_dotenv:
            self._merge_dotenv()

    def _merge_dotenv(self) -> None:
        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            path = self._dotenv_path or find_dotenv(usecwd=True)
            try:
                found = load_dotenv(dotenv_path=path)
            except OSError as e:
                logger.warning(f"Could not read .env file {path}: {e}")
            else:
                if found:
                    logger.debug(f"Merged .env file {path} into the environment")
            self._dotenv_loaded = True

    def hostname(self, value: str | None = None) -> str:
        """The Scalr host, from ``value`` or ``SCALR_HOSTNAME``.

        Raises:
            CredentialNotFoundError: Neither is set.
        """
        hostname = self.resolve(value=value, env_var_name=HOSTNAME_ENV, required=True, mask_in_logs=False)
        return hostname  # type: ignore[return-value]

    def token(self, value: str | None = None) -> str:
        """The API token, from ``value``, ``SCALR_TOKEN`` or the file named by ``SCALR_TOKEN_FILE``.

        An empty token counts as missing.

        Raises:
            CredentialNotFoundError: No source produced a token.
            CredentialFileError: ``SCALR_TOKEN_FILE`` is set but unreadable.
        """
        token = self.resolve(value=value, env_var_name=TOKEN_ENV)
        if token is None and os.environ.get(TOKEN_FILE_ENV):
            token = self.resolve_from_file(env_var_name=TOKEN_FILE_ENV, required=True)
        if not token:
            raise CredentialNotFoundError(
                f"Required credential not found (checked env vars: {TOKEN_ENV}, {TOKEN_FILE_ENV})",
                env_var_name=TOKEN_ENV,
            )
        return token

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Return ``value``, else the environment variable, else ``default``.

        An environment variable set to the empty string still counts as set.
        Pass ``mask_in_logs=False`` for settings that are not secret.

        Raises:
            CredentialNotFoundError: ``required`` is set and nothing was found.
        """
        if value is not None:
            result, source = value, "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
        elif default is not None:
            result, source = default, "default value"
        elif required:
            message = "Required credential not found"
            if env_var_name:
                message += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(message, env_var_name=env_var_name)
        else:
            return None

        logger.debug(f"Resolved credential from {source}: {_MASK if mask_in_logs else result}")
        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from ``file_path`` or the file named by ``env_var_name``.

        ``~`` and ``$VAR`` in the path are expanded and the contents stripped.
        Without ``required``, a missing or unreadable file yields None.

        Raises:
            CredentialFileError: ``required`` is set and the file could not be read.
        """
        raw_path = str(file_path) if file_path is not None else None
        if raw_path is None and env_var_name:
            raw_path = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None
        if raw_path is None:
            if required:
                message = "No file path provided for credential resolution"
                if env_var_name:
                    message += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(message)
            return None

        path = Path(os.path.expandvars(raw_path)).expanduser()
        try:
            content = path.read_text()
        except FileNotFoundError:
            problem = f"Credential file not found: {path}"
            cause = None
        except OSError as e:
            problem = f"Could not read credential file {path}: {e}"
            cause = e
        else:
            logger.debug(f"Resolved credential from file {path}: {_MASK}")
            return content.strip()

        if required:
            raise CredentialFileError(problem) from cause
        logger.warning(problem)
        return None
