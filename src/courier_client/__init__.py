"""Courier Client - Python client for the Courier notification delivery API.

Every public method describes one remote endpoint and hands it to a small
request pipeline:
- Credential resolution (bearer token or basic auth, env/.env aware)
- Request building (JSON body, standard headers, optional idempotency key)
- A pluggable transport (httpx by default)
- Response interpretation with status-specific exceptions

Example:
    ```python
    from courier_client import ClientConfig, CourierClient

    # Resolve configuration once, at application startup
    config = ClientConfig.from_env()

    with CourierClient(config) as client:
        result = client.send_notification(
            event="welcome",
            recipient="user_1",
            idempotency_key="signup-user_1",
        )
        print(result["messageId"])
    ```
"""

__version__ = "0.1.0"

from courier_client.auth import BasicCredentials, BearerCredentials, NoCredentials
from courier_client.client import CourierClient
from courier_client.config import ClientConfig
from courier_client.errors import (
    CourierError,
    MalformedResponseError,
    RequestError,
    ValidationError,
)
from courier_client.transport import ApiResponse, HttpxTransport, Transport

__all__ = [
    "ApiResponse",
    "BasicCredentials",
    "BearerCredentials",
    "ClientConfig",
    "CourierClient",
    "CourierError",
    "HttpxTransport",
    "MalformedResponseError",
    "NoCredentials",
    "RequestError",
    "Transport",
    "ValidationError",
    "__version__",
]
