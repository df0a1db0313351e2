"""Response interpretation: status checks and JSON decoding."""

import json
from typing import TYPE_CHECKING, Any

from courier_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from courier_client.errors.models import ErrorDetail

if TYPE_CHECKING:
    from courier_client.transport.base import ApiResponse

EXCEPTION_MAP: dict[int, type[RequestError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def raise_for_status(response: "ApiResponse") -> None:
    """Raise the matching `RequestError` subclass for a non-2xx response.

    Args:
        response: Response returned by the transport

    Raises:
        RequestError subclass based on status code
    """
    status_code = response.status_code
    if is_success(status_code):
        return

    error_detail = ErrorDetail.from_body(response.raw_body)

    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = RequestError

    if error_detail:
        message = f"HTTP {status_code}: {error_detail.to_exception_message()}"
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    common = {
        "status_code": status_code,
        "raw_body": response.raw_body,
        "response": response,
        "error_detail": error_detail,
    }

    if exc_class is RateLimitError:
        retry_after = None
        header = response.headers.get("retry-after")
        if header is not None:
            try:
                retry_after = int(header)
            except ValueError:
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, **common)

    if exc_class is UnprocessableEntityError:
        validation_errors = None
        if error_detail and error_detail.extensions:
            if "errors" in error_detail.extensions:
                validation_errors = error_detail.extensions["errors"]
            else:
                validation_errors = error_detail.extensions.get("validation_errors")
        raise UnprocessableEntityError(message, validation_errors=validation_errors, **common)

    raise exc_class(message, **common)


def interpret(response: "ApiResponse") -> Any:
    """Turn a transport response into decoded JSON.

    An empty 2xx body (e.g. 204 No Content from a DELETE) decodes to None.

    Raises:
        RequestError: status outside 200-299
        MalformedResponseError: 2xx whose body is not valid JSON
    """
    raise_for_status(response)

    if not response.raw_body.strip():
        return None

    try:
        return json.loads(response.raw_body)
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedResponseError(
            f"HTTP {response.status_code}: response body is not valid JSON ({e})",
            status_code=response.status_code,
            raw_body=response.raw_body,
        ) from e
