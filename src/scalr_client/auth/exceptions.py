"""Exceptions raised while resolving the Scalr hostname and token."""


class CredentialError(Exception):
    """Base class for credential resolution problems."""


class CredentialNotFoundError(CredentialError):
    """A required setting was not found in any source.

    Attributes:
        env_var_name: The environment variable that was consulted, if any.

    Example:
        ```python
        try:
            client = Client.from_env()
        except CredentialNotFoundError as e:
            print(f"Set {e.env_var_name}")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A token file could not be located or read."""
