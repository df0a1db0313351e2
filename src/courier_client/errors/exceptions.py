"""Structured exceptions for the Courier client.

Hierarchy:

    CourierError
    ├── ValidationError            local precondition failed, nothing was sent
    ├── MalformedResponseError     2xx response whose body is not JSON
    ├── RequestError               non-2xx response
    │   ├── ClientError            4xx
    │   │   ├── BadRequestError, UnauthorizedError, ForbiddenError,
    │   │   ├── NotFoundError, ConflictError, UnprocessableEntityError
    │   │   └── RateLimitError
    │   └── ServerError            5xx
    └── CredentialError            (courier_client.auth)

Transport failures (`httpx.TransportError` from the default transport) are
not wrapped and do not appear here.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from courier_client.errors.models import ErrorDetail
    from courier_client.transport.base import ApiResponse


class CourierError(Exception):
    """Base exception for everything raised by the Courier client."""

    pass


class ValidationError(CourierError):
    """A call was rejected locally before any request was built."""

    pass


class MalformedResponseError(CourierError):
    """The API answered 2xx but the body could not be decoded as JSON."""

    def __init__(self, message: str, status_code: int, raw_body: bytes):
        super().__init__(message)
        self.status_code = status_code
        self.raw_body = raw_body


class RequestError(CourierError):
    """The API answered with a status outside 200-299.

    Attributes:
        status_code: HTTP status of the response.
        raw_body: Undecoded response body, kept for diagnostics.
        message: Human readable summary.
        response: The full `ApiResponse`.
        error_detail: Parsed error body, or None if it was not JSON.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        raw_body: bytes = b"",
        response: "ApiResponse | None" = None,
        error_detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.raw_body = raw_body
        self.response = response
        self.error_detail = error_detail


class ClientError(RequestError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(RequestError):
    """5xx server errors."""

    pass
