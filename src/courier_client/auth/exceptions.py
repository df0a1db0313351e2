"""Exceptions raised while resolving client configuration.

These only come out of `ClientConfig.from_env()` and `CredentialResolver`;
the client never raises them for missing credentials on its own.

Example:
    ```python
    from courier_client import ClientConfig
    from courier_client.auth import CredentialNotFoundError

    try:
        config = ClientConfig.from_env(require_credentials=True)
    except CredentialNotFoundError as e:
        print(f"Set {e.env_var_name} before starting the worker")
    ```
"""

from courier_client.errors.exceptions import CourierError


class CredentialError(CourierError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a required credential file cannot be read."""

    pass
