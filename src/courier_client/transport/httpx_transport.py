"""Default transport built on httpx.

## Injecting a configured client

```python
import httpx
from courier_client import CourierClient, HttpxTransport

http = httpx.Client(timeout=10.0, proxy="http://proxy.internal:3128")
client = CourierClient(transport=HttpxTransport(client=http))
```

## Testing without a network

```python
def handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"messageId": "1-abc"})

transport = HttpxTransport(transport=httpx.MockTransport(handler))
```
"""

import logging

import httpx

from courier_client.request import OutboundRequest
from courier_client.transport.base import ApiResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpxTransport:
    """Send requests through an `httpx.Client`.

    The client is created lazily on first use unless one is passed in. A
    client passed in is never closed by this transport; one it created is
    closed by `close()`.

    `httpx.TransportError` (connect errors, TLS failures, timeouts)
    propagates unchanged.

    Args:
        client: Pre-configured httpx client to use
        timeout: Timeout in seconds for a lazily created client
        transport: Low-level httpx transport for a lazily created client
            (e.g. `httpx.MockTransport` in tests). Cannot be combined with
            `client`, which already carries its own transport.

    Raises:
        ValueError: If both `client` and `transport` are given
    """

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if client is not None and transport is not None:
            raise ValueError("Pass either client or transport to HttpxTransport, not both")
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._client

    def send(self, request: OutboundRequest) -> ApiResponse:
        """Send `request` and return the raw response."""
        logger.debug(f"Sending {request.method.value} {request.url}")

        response = self._get_client().request(
            request.method.value,
            request.url,
            headers=request.headers,
            content=request.body,
        )

        logger.debug(f"Received {response.status_code} for {request.method.value} {request.url}")

        return ApiResponse(
            status_code=response.status_code,
            raw_body=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
