"""Client configuration.

`ClientConfig` is a plain value object. The library never looks at the
environment on its own; applications call `ClientConfig.from_env()` once at
startup and pass the result to `CourierClient`.

Environment variables:
    COURIER_BASE_URL: API base URL (default https://api.courier.com/)
    COURIER_AUTH_TOKEN: Bearer token
    COURIER_AUTH_TOKEN_FILE: File holding the bearer token
    COURIER_AUTH_USERNAME / COURIER_AUTH_PASSWORD: Basic auth pair
"""

import logging
from dataclasses import dataclass, field

from courier_client.auth.credentials import CredentialResolver
from courier_client.auth.exceptions import CredentialNotFoundError
from courier_client.auth.schemes import Credentials, NoCredentials, resolve_credentials

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.courier.com/"

BASE_URL_ENV = "COURIER_BASE_URL"
AUTH_TOKEN_ENV = "COURIER_AUTH_TOKEN"
AUTH_TOKEN_FILE_ENV = "COURIER_AUTH_TOKEN_FILE"
AUTH_USERNAME_ENV = "COURIER_AUTH_USERNAME"
AUTH_PASSWORD_ENV = "COURIER_AUTH_PASSWORD"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for `CourierClient`.

    Attributes:
        base_url: API base URL.
        auth_token: Bearer token; wins over basic auth when set.
        username: Basic auth user name.
        password: Basic auth password.
        env_auth_token: Token found in the environment.
        env_username: Basic auth user name found in the environment.
        env_password: Basic auth password found in the environment.

    The `env_*` fields are filled by `from_env()` and keep the precedence
    explicit token > environment token > explicit basic pair > environment
    basic pair intact when the config is later combined with explicit
    keyword arguments.
    """

    base_url: str = DEFAULT_BASE_URL
    auth_token: str | None = field(default=None, repr=False)
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    env_auth_token: str | None = field(default=None, repr=False)
    env_username: str | None = None
    env_password: str | None = field(default=None, repr=False)

    @classmethod
    def from_env(
        cls,
        *,
        base_url: str | None = None,
        auth_token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        resolver: CredentialResolver | None = None,
        require_credentials: bool = False,
    ) -> "ClientConfig":
        """Build a config from explicit values with environment fallbacks.

        Args:
            base_url: Overrides COURIER_BASE_URL.
            auth_token: Overrides COURIER_AUTH_TOKEN.
            username: Basic auth user name (used together with `password`).
            password: Basic auth password.
            resolver: Resolver to use; defaults to one that loads `.env`.
            require_credentials: Raise instead of returning a config with no
                credentials. Off by default: the API itself rejects
                unauthenticated calls with 401.

        Raises:
            CredentialNotFoundError: If require_credentials=True and neither a
                token nor a complete basic auth pair could be found.
        """
        resolver = resolver if resolver is not None else CredentialResolver()

        resolved_url = resolver.resolve(
            value=base_url,
            env_var_name=BASE_URL_ENV,
            default=DEFAULT_BASE_URL,
            mask_in_logs=False,
        )

        env_token = resolver.resolve(env_var_name=AUTH_TOKEN_ENV)
        if env_token is None:
            env_token = resolver.resolve_from_file(env_var_name=AUTH_TOKEN_FILE_ENV)

        config = cls(
            base_url=resolved_url,
            auth_token=auth_token or None,
            username=username or None,
            password=password or None,
            env_auth_token=env_token,
            env_username=resolver.resolve(env_var_name=AUTH_USERNAME_ENV, mask_in_logs=False),
            env_password=resolver.resolve(env_var_name=AUTH_PASSWORD_ENV),
        )

        if require_credentials and isinstance(config.credentials(), NoCredentials):
            raise CredentialNotFoundError(
                f"No Courier credentials found (set {AUTH_TOKEN_ENV} or "
                f"{AUTH_USERNAME_ENV} and {AUTH_PASSWORD_ENV})",
                env_var_name=AUTH_TOKEN_ENV,
            )

        logger.debug(f"Courier client configured for {config.base_url}")
        return config

    def credentials(self) -> Credentials:
        """Resolve the credentials this config describes."""
        return resolve_credentials(
            self.auth_token,
            self.username,
            self.password,
            env_auth_token=self.env_auth_token,
            env_username=self.env_username,
            env_password=self.env_password,
        )
