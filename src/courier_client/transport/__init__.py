"""Transport layer for the Courier client.

A transport is any object with a `send(OutboundRequest) -> ApiResponse`
method. `HttpxTransport` is used when none is supplied; tests and
alternative HTTP stacks plug in their own.

Example:
    ```python
    from courier_client import CourierClient
    from courier_client.testing import RecordingTransport, create_mock_response

    transport = RecordingTransport([create_mock_response({"messageId": "1-abc"})])
    client = CourierClient(auth_token="pk_test", transport=transport)
    ```
"""

from courier_client.transport.base import ApiResponse, Transport
from courier_client.transport.httpx_transport import HttpxTransport

__all__ = ["ApiResponse", "HttpxTransport", "Transport"]
