"""Authentication components for the Courier client.

This module provides:
- Credential types (bearer token, basic auth, none)
- Credential precedence rules and Authorization header rendering
- Environment/.env/file lookups through `CredentialResolver`

Example:
    ```python
    from courier_client.auth import authorization_header, resolve_credentials

    credentials = resolve_credentials(auth_token="pk_prod_123")
    authorization_header(credentials)  # "Bearer pk_prod_123"
    ```
"""

from courier_client.auth.credentials import CredentialResolver
from courier_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from courier_client.auth.schemes import (
    BasicCredentials,
    BearerCredentials,
    Credentials,
    NoCredentials,
    authorization_header,
    resolve_credentials,
)

__all__ = [
    "BasicCredentials",
    "BearerCredentials",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "NoCredentials",
    "authorization_header",
    "resolve_credentials",
]
