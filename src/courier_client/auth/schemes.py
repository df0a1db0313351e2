"""Authorization schemes supported by the Courier API.

Courier accepts either a bearer token or HTTP basic credentials. The
scheme is chosen once per client and never changes afterwards.
"""

import base64
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoCredentials:
    """No credentials configured; requests go out with an empty Authorization header."""

    scheme: str = field(default="", init=False)


@dataclass(frozen=True)
class BearerCredentials:
    """Bearer token authentication (`Authorization: Bearer <token>`)."""

    token: str = field(repr=False)
    scheme: str = field(default="Bearer", init=False)


@dataclass(frozen=True)
class BasicCredentials:
    """HTTP basic authentication (`Authorization: Basic base64(user:pass)`)."""

    username: str
    password: str = field(repr=False)
    scheme: str = field(default="Basic", init=False)


Credentials = NoCredentials | BearerCredentials | BasicCredentials


def resolve_credentials(
    auth_token: str | None = None,
    username: str | None = None,
    password: str | None = None,
    *,
    env_auth_token: str | None = None,
    env_username: str | None = None,
    env_password: str | None = None,
) -> Credentials:
    """Pick the credentials a client will use.

    Precedence: explicit token, environment token, explicit basic pair,
    environment basic pair, then no credentials at all. Empty strings count
    as missing, and a basic pair is only used when both halves are present.

    The environment values are passed in rather than read here; see
    `ClientConfig.from_env()` for the lookup itself.

    Missing credentials are not an error. The API rejects the request
    with 401/403 and that surfaces as an `UnauthorizedError`/`ForbiddenError`.
    """
    if auth_token:
        logger.debug("Using bearer token from explicit argument")
        return BearerCredentials(auth_token)
    if env_auth_token:
        logger.debug("Using bearer token from environment")
        return BearerCredentials(env_auth_token)
    if username and password:
        logger.debug("Using basic auth from explicit arguments")
        return BasicCredentials(username, password)
    if env_username and env_password:
        logger.debug("Using basic auth from environment")
        return BasicCredentials(env_username, env_password)

    logger.debug("No Courier credentials configured")
    return NoCredentials()


def authorization_header(credentials: Credentials) -> str:
    """Render the `Authorization` header value for `credentials`.

    Returns an empty string for `NoCredentials` instead of raising.
    """
    if isinstance(credentials, BearerCredentials):
        return f"Bearer {credentials.token}"
    if isinstance(credentials, BasicCredentials):
        pair = f"{credentials.username}:{credentials.password}".encode()
        return f"Basic {base64.b64encode(pair).decode('ascii')}"
    return ""
