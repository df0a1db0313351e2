"""Transport contract shared by the default httpx transport and test fakes."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from courier_client.request import OutboundRequest


@dataclass(frozen=True)
class ApiResponse:
    """Status, headers and undecoded body of one HTTP exchange.

    Header names are normalised to lower case.
    """

    status_code: int
    raw_body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "headers", {k.lower(): v for k, v in self.headers.items()})

    @property
    def text(self) -> str:
        return self.raw_body.decode("utf-8", errors="replace")


@runtime_checkable
class Transport(Protocol):
    """Anything that can send an `OutboundRequest`.

    Implementations return the response whatever its status code. Network
    failures are raised as-is; the client does not wrap or retry them.
    """

    def send(self, request: OutboundRequest) -> ApiResponse: ...
