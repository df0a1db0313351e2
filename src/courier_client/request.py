"""Outbound request construction.

Every endpoint call ends up here: `RequestBuilder.build()` joins the path onto
the base URL, encodes the parameters as JSON and attaches the standard
headers. The result is an immutable `OutboundRequest` that any `Transport`
can send.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from courier_client import __version__
from courier_client.auth.schemes import Credentials, NoCredentials, authorization_header

logger = logging.getLogger(__name__)

USER_AGENT = f"courier-python/{__version__}"


class HttpMethod(str, Enum):
    """HTTP methods used by the Courier API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class OutboundRequest:
    """A fully built HTTP request, ready to hand to a transport."""

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def json(self) -> Any:
        """Decode the JSON body (None when the request has no body)."""
        if self.body is None:
            return None
        return json.loads(self.body)


def build_query(params: Mapping[str, Any]) -> str:
    """Encode query parameters per RFC 3986.

    Keys whose value is None are dropped; empty strings are kept (`cursor=`).
    Spaces become `%20`, never `+`.

    Returns:
        The encoded query without a leading `?`, or "" if nothing is left
    """
    present = {key: value for key, value in params.items() if value is not None}
    return urlencode(present, quote_via=quote)


def encode_default(value: Any) -> Any:
    """`json.dumps` hook for read-only mappings and non-list sequences."""
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def quote_segment(value: str) -> str:
    """Percent-encode a single path segment (ids may contain `/` or spaces)."""
    return quote(str(value), safe="")


class RequestBuilder:
    """Build `OutboundRequest` objects for one base URL and one set of credentials.

    Example:
        ```python
        builder = RequestBuilder("https://api.courier.com/", BearerCredentials("pk_123"))
        request = builder.build(HttpMethod.POST, "send", {"event": "welcome"}, idempotency_key="abc-123")
        request.headers["Idempotency-Key"]  # "abc-123"
        ```
    """

    def __init__(
        self,
        base_url: str,
        credentials: Credentials | None = None,
        user_agent: str = USER_AGENT,
    ):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.credentials = credentials if credentials is not None else NoCredentials()
        self.user_agent = user_agent

    def headers(self, idempotency_key: str | None = None) -> dict[str, str]:
        headers = {
            "Authorization": authorization_header(self.credentials),
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        return headers

    def build(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | None = None,
        idempotency_key: str | None = None,
    ) -> OutboundRequest:
        """Build a request.

        Args:
            method: HTTP method
            path: Path relative to the base URL, query string included if any
            params: JSON body. A non-GET request without params sends `{}`;
                a GET without params sends no body.
            idempotency_key: Sent as `Idempotency-Key` when non-empty

        Returns:
            A new OutboundRequest
        """
        method = HttpMethod(method.upper()) if isinstance(method, str) else method

        if params is None and method is not HttpMethod.GET:
            params = {}

        body = None
        if params is not None:
            body = json.dumps(
                dict(params), separators=(",", ":"), ensure_ascii=False, default=encode_default
            ).encode("utf-8")

        url = self.base_url + path.lstrip("/")
        logger.debug(f"Built {method.value} {url}")

        return OutboundRequest(
            method=method,
            url=url,
            headers=self.headers(idempotency_key),
            body=body,
        )
