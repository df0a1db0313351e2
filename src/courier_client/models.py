"""Request parameter models.

Each endpoint that sends a JSON body has a dataclass here. `to_body()` turns
it into the mapping that gets JSON-encoded, in field declaration order.

Two serialization rules exist:

- `omit_empty = True` (send, send-to-list, brand create/replace): fields that
  are None, "" or an empty mapping/sequence are left out of the body.
- `omit_empty = False` (everything else): every field is sent, None included
  as JSON null.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, ClassVar

from courier_client.errors.exceptions import ValidationError


def is_empty(value: Any) -> bool:
    """Return True for values the filtering endpoints leave out."""
    if value is None:
        return True
    if isinstance(value, (str, bytes)):
        return value == "" or value == b""
    if isinstance(value, (Mapping, Sequence)):
        return len(value) == 0
    return False


@dataclass
class RequestParams:
    """Base class for JSON request bodies."""

    omit_empty: ClassVar[bool] = False

    def to_body(self) -> dict[str, Any]:
        body = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if self.omit_empty and is_empty(value):
                continue
            body[f.name] = value
        return body


@dataclass
class SendParams(RequestParams):
    """Body of `POST /send`."""

    omit_empty: ClassVar[bool] = True

    event: str
    recipient: str
    brand: str | None = None
    profile: Mapping[str, Any] | None = None
    data: Mapping[str, Any] | None = None
    preferences: Mapping[str, Any] | None = None
    override: Mapping[str, Any] | None = None


@dataclass
class SendToListParams(RequestParams):
    """Body of `POST /send/list`.

    Exactly one of `list` or `pattern` must be given.
    """

    omit_empty: ClassVar[bool] = True

    event: str
    list: str | None = None
    pattern: str | None = None
    brand: str | None = None
    data: Mapping[str, Any] | None = None
    override: Mapping[str, Any] | None = None

    def __post_init__(self):
        if bool(self.list) == bool(self.pattern):
            raise ValidationError("list.send requires a list id or a pattern")


@dataclass
class BrandParams(RequestParams):
    """Body of `POST /brands` and `PUT /brands/{brand_id}`.

    `id` is only meaningful on create; the API assigns one when it is absent.
    """

    omit_empty: ClassVar[bool] = True

    name: str
    settings: Mapping[str, Any]
    id: str | None = None
    snippets: Mapping[str, Any] | None = None


@dataclass
class ListParams(RequestParams):
    """Body of `PUT /lists/{list_id}`."""

    name: str


@dataclass
class ListRecipientsParams(RequestParams):
    """Body of `PUT /lists/{list_id}/subscriptions`.

    Each recipient is a mapping with at least `recipientId`.
    """

    recipients: Sequence[Mapping[str, Any]]


@dataclass
class EventParams(RequestParams):
    """Body of `PUT /events/{event_id}`."""

    id: str
    type: str


@dataclass
class ProfileParams(RequestParams):
    """Body of `POST`/`PUT /profiles/{recipient_id}`."""

    profile: Mapping[str, Any] | None = None


@dataclass
class ProfilePatchParams(RequestParams):
    """Body of `PATCH /profiles/{recipient_id}`: a JSON Patch (RFC 6902) document."""

    patch: Sequence[Mapping[str, Any]]


@dataclass
class PreferencesParams(RequestParams):
    """Body of `GET`/`PUT /preferences/{recipient_id}`."""

    preferred_channel: str
