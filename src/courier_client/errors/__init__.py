"""Error taxonomy and response interpretation for the Courier client."""

from courier_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    CourierError,
    ForbiddenError,
    MalformedResponseError,
    NotFoundError,
    RateLimitError,
    RequestError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
    ValidationError,
)
from courier_client.errors.handler import interpret, raise_for_status
from courier_client.errors.models import ErrorDetail

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "CourierError",
    "ErrorDetail",
    "ForbiddenError",
    "MalformedResponseError",
    "NotFoundError",
    "RateLimitError",
    "RequestError",
    "ServerError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "ValidationError",
    "interpret",
    "raise_for_status",
]
