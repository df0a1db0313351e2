"""Testing utilities for code that uses the Courier client.

Example:
    ```python
    from courier_client import CourierClient
    from courier_client.testing import RecordingTransport, create_error_response


    def test_missing_profile_is_reported():
        transport = RecordingTransport([create_error_response(404, "not found")])
        client = CourierClient(auth_token="pk_test", transport=transport)

        with pytest.raises(NotFoundError):
            client.get_profile("user_1")

        assert transport.last_request.url.endswith("profiles/user_1")
    ```
"""

import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from courier_client.request import OutboundRequest
from courier_client.transport.base import ApiResponse

Responder = Callable[[OutboundRequest], ApiResponse]


def create_mock_response(
    body: Any = None,
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> ApiResponse:
    """Build a JSON `ApiResponse`. `body=None` gives an empty body."""
    raw_body = b"" if body is None else json.dumps(body).encode("utf-8")
    return ApiResponse(
        status_code=status_code,
        raw_body=raw_body,
        headers={"content-type": "application/json", **(headers or {})},
    )


def create_error_response(
    status_code: int,
    message: str = "error",
    headers: Mapping[str, str] | None = None,
) -> ApiResponse:
    """Build an error response with Courier's `{"message": ...}` body."""
    return create_mock_response({"message": message}, status_code=status_code, headers=headers)


class RecordingTransport:
    """Fake transport that records requests and replays canned responses.

    Args:
        responses: Responses returned in order, one per request. Ignored
            when `responder` is given.
        responder: Callable computing the response from the request.

    Once `responses` is exhausted every further request gets a 200 with `{}`.
    """

    def __init__(
        self,
        responses: Iterable[ApiResponse] = (),
        responder: Responder | None = None,
    ) -> None:
        self.requests: list[OutboundRequest] = []
        self._responses = list(responses)
        self._responder = responder

    @property
    def last_request(self) -> OutboundRequest:
        if not self.requests:
            raise AssertionError("no request was sent")
        return self.requests[-1]

    def send(self, request: OutboundRequest) -> ApiResponse:
        self.requests.append(request)
        if self._responder is not None:
            return self._responder(request)
        if self._responses:
            return self._responses.pop(0)
        return create_mock_response({})


__all__ = [
    "RecordingTransport",
    "create_error_response",
    "create_mock_response",
]
