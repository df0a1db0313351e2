"""Courier API client."""

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from courier_client.auth.schemes import Credentials
from courier_client.config import ClientConfig
from courier_client.endpoints import (
    CREATE_BRAND,
    DELETE_BRAND,
    DELETE_LIST,
    DELETE_SUBSCRIPTION,
    GET_BRAND,
    GET_EVENT,
    GET_LIST,
    GET_MESSAGE,
    GET_MESSAGE_HISTORY,
    GET_PREFERENCES,
    GET_PROFILE,
    GET_PROFILE_LISTS,
    LIST_BRANDS,
    LIST_EVENTS,
    LIST_LISTS,
    LIST_MESSAGES,
    LIST_SUBSCRIPTIONS,
    PATCH_PROFILE,
    PUT_EVENT,
    PUT_LIST,
    PUT_SUBSCRIPTION,
    PUT_SUBSCRIPTIONS,
    REPLACE_BRAND,
    REPLACE_PROFILE,
    RESTORE_LIST,
    SEND,
    SEND_LIST,
    UPDATE_PREFERENCES,
    UPSERT_PROFILE,
    Endpoint,
)
from courier_client.errors.exceptions import ValidationError
from courier_client.errors.handler import interpret
from courier_client.models import (
    BrandParams,
    EventParams,
    ListParams,
    ListRecipientsParams,
    PreferencesParams,
    ProfileParams,
    ProfilePatchParams,
    RequestParams,
    SendParams,
    SendToListParams,
)
from courier_client.request import OutboundRequest, RequestBuilder, build_query
from courier_client.transport.base import Transport
from courier_client.transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)

JSON = Any


class CourierClient:
    """Client for the Courier notification API.

    Every method sends exactly one request and returns the decoded JSON
    response. Non-2xx responses raise a `RequestError` subclass; transport
    failures propagate unchanged.

    Args:
        config: Connection settings, usually from `ClientConfig.from_env()`.
        base_url: Overrides `config.base_url`.
        auth_token: Bearer token; overrides the config's token.
        username: Basic auth user name. Together with `password` it replaces
            the config's pair; either one alone is ignored.
        password: Basic auth password.
        transport: Object with `send(OutboundRequest) -> ApiResponse`.
            Defaults to an `HttpxTransport` owned (and closed) by this client.

    Example:
        ```python
        client = CourierClient(auth_token="pk_prod_123")
        client.send_notification(event="welcome", recipient="user_1", data={"name": "Ada"})
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str | None = None,
        auth_token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        transport: Transport | None = None,
    ):
        config = config if config is not None else ClientConfig()
        overrides = {"base_url": base_url, "auth_token": auth_token}
        # A basic auth pair only overrides the config's pair as a whole
        if username and password:
            overrides.update(username=username, password=password)
        overrides = {key: value for key, value in overrides.items() if value}
        self.config = dataclasses.replace(config, **overrides)

        self._builder = RequestBuilder(self.config.base_url, self.config.credentials())
        self._owns_transport = transport is None
        self._transport: Transport = transport if transport is not None else HttpxTransport()

    @property
    def credentials(self) -> Credentials:
        return self._builder.credentials

    @property
    def transport(self) -> Transport:
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        self.set_transport(transport)

    def set_transport(self, transport: Transport) -> None:
        """Replace the transport used for all subsequent calls.

        The previous transport is closed if this client created it.
        """
        if not isinstance(transport, Transport):
            raise TypeError(f"transport must provide send(request), got {type(transport).__name__}")
        self.close()
        self._transport = transport
        self._owns_transport = False

    def close(self) -> None:
        """Close the default transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def build_request(
        self,
        endpoint: Endpoint,
        *,
        segments: Mapping[str, str] | None = None,
        params: RequestParams | Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        idempotency_key: str | None = None,
    ) -> OutboundRequest:
        """Build the request for `endpoint` without sending it."""
        if idempotency_key and not endpoint.idempotent:
            raise ValidationError(f"{endpoint.name} does not accept an idempotency key")

        path = endpoint.format_path(**(segments or {}))
        if query:
            encoded = build_query(query)
            if encoded:
                path = f"{path}?{encoded}"

        body = params.to_body() if isinstance(params, RequestParams) else params
        return self._builder.build(endpoint.method, path, body, idempotency_key=idempotency_key)

    def _call(self, endpoint: Endpoint, **kwargs) -> JSON:
        request = self.build_request(endpoint, **kwargs)
        return interpret(self._transport.send(request))

    # Send

    def send_notification(
        self,
        event: str,
        recipient: str,
        brand: str | None = None,
        profile: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        preferences: Mapping[str, Any] | None = None,
        override: Mapping[str, Any] | None = None,
        idempotency_key: str | None = None,
    ) -> JSON:
        """Send a notification to a single recipient.

        Optional fields that are None or empty are left out of the request.
        """
        params = SendParams(
            event=event,
            recipient=recipient,
            brand=brand,
            profile=profile,
            data=data,
            preferences=preferences,
            override=override,
        )
        return self._call(SEND, params=params, idempotency_key=idempotency_key)

    def send_notification_to_list(
        self,
        event: str,
        list_id: str | None = None,
        pattern: str | None = None,
        brand: str | None = None,
        data: Mapping[str, Any] | None = None,
        override: Mapping[str, Any] | None = None,
        idempotency_key: str | None = None,
    ) -> JSON:
        """Send a notification to the subscribers of a list or list pattern.

        Raises:
            ValidationError: unless exactly one of `list_id` or `pattern` is given
        """
        params = SendToListParams(
            event=event,
            list=list_id,
            pattern=pattern,
            brand=brand,
            data=data,
            override=override,
        )
        return self._call(SEND_LIST, params=params, idempotency_key=idempotency_key)

    # Messages

    def get_messages(
        self,
        cursor: str | None = None,
        event: str | None = None,
        list_id: str | None = None,
        message_id: str | None = None,
        notification: str | None = None,
        recipient: str | None = None,
    ) -> JSON:
        """Fetch the statuses of previously sent messages."""
        query = {
            "cursor": cursor,
            "event": event,
            "list": list_id,
            "message_id": message_id,
            "notification": notification,
            "recipient": recipient,
        }
        return self._call(LIST_MESSAGES, query=query)

    def get_message(self, message_id: str) -> JSON:
        return self._call(GET_MESSAGE, segments={"message_id": message_id})

    def get_message_history(self, message_id: str, type: str | None = None) -> JSON:
        """Fetch the events of a sent message, optionally only those of one `type`."""
        return self._call(GET_MESSAGE_HISTORY, segments={"message_id": message_id}, query={"type": type})

    # Lists

    def get_lists(self, cursor: str | None = None, pattern: str | None = None) -> JSON:
        return self._call(LIST_LISTS, query={"cursor": cursor, "pattern": pattern})

    def get_list(self, list_id: str) -> JSON:
        return self._call(GET_LIST, segments={"list_id": list_id})

    def put_list(self, list_id: str, name: str) -> JSON:
        """Create a list or replace an existing one."""
        return self._call(PUT_LIST, segments={"list_id": list_id}, params=ListParams(name=name))

    def delete_list(self, list_id: str) -> JSON:
        return self._call(DELETE_LIST, segments={"list_id": list_id})

    def restore_list(self, list_id: str) -> JSON:
        """Restore a previously deleted list."""
        return self._call(RESTORE_LIST, segments={"list_id": list_id})

    def get_list_subscriptions(self, list_id: str, cursor: str | None = None) -> JSON:
        return self._call(LIST_SUBSCRIPTIONS, segments={"list_id": list_id}, query={"cursor": cursor})

    def subscribe_multiple_recipients_to_list(
        self, list_id: str, recipients: Sequence[Mapping[str, Any]]
    ) -> JSON:
        """Subscribe several recipients at once; the list is created if missing."""
        return self._call(
            PUT_SUBSCRIPTIONS,
            segments={"list_id": list_id},
            params=ListRecipientsParams(recipients=recipients),
        )

    def subscribe_recipient_to_list(self, list_id: str, recipient_id: str) -> JSON:
        """Subscribe one recipient; the list is created if missing."""
        return self._call(PUT_SUBSCRIPTION, segments={"list_id": list_id, "recipient_id": recipient_id})

    def delete_list_subscription(self, list_id: str, recipient_id: str) -> JSON:
        return self._call(DELETE_SUBSCRIPTION, segments={"list_id": list_id, "recipient_id": recipient_id})

    # Brands

    def get_brands(self, cursor: str | None = None) -> JSON:
        return self._call(LIST_BRANDS, query={"cursor": cursor})

    def create_brand(
        self,
        name: str,
        settings: Mapping[str, Any],
        id: str | None = None,
        snippets: Mapping[str, Any] | None = None,
        idempotency_key: str | None = None,
    ) -> JSON:
        """Create a brand. The API assigns an id when `id` is omitted."""
        params = BrandParams(name=name, settings=settings, id=id, snippets=snippets)
        return self._call(CREATE_BRAND, params=params, idempotency_key=idempotency_key)

    def get_brand(self, brand_id: str) -> JSON:
        return self._call(GET_BRAND, segments={"brand_id": brand_id})

    def replace_brand(
        self,
        brand_id: str,
        name: str,
        settings: Mapping[str, Any],
        snippets: Mapping[str, Any] | None = None,
    ) -> JSON:
        params = BrandParams(name=name, settings=settings, snippets=snippets)
        return self._call(REPLACE_BRAND, segments={"brand_id": brand_id}, params=params)

    def delete_brand(self, brand_id: str) -> JSON:
        return self._call(DELETE_BRAND, segments={"brand_id": brand_id})

    # Events

    def get_events(self) -> JSON:
        return self._call(LIST_EVENTS)

    def get_event(self, event_id: str) -> JSON:
        return self._call(GET_EVENT, segments={"event_id": event_id})

    def put_event(self, event_id: str, id: str, type: str) -> JSON:
        """Map an event to a notification, creating the mapping if needed."""
        return self._call(PUT_EVENT, segments={"event_id": event_id}, params=EventParams(id=id, type=type))

    # Profiles

    def get_profile(self, recipient_id: str) -> JSON:
        return self._call(GET_PROFILE, segments={"recipient_id": recipient_id})

    def upsert_profile(self, recipient_id: str, profile: Mapping[str, Any] | None = None) -> JSON:
        """Merge `profile` into the stored profile, creating it if needed."""
        return self._call(
            UPSERT_PROFILE, segments={"recipient_id": recipient_id}, params=ProfileParams(profile=profile)
        )

    def patch_profile(self, recipient_id: str, patch: Sequence[Mapping[str, Any]]) -> JSON:
        """Apply a JSON Patch (RFC 6902) to the stored profile."""
        return self._call(
            PATCH_PROFILE, segments={"recipient_id": recipient_id}, params=ProfilePatchParams(patch=patch)
        )

    def replace_profile(self, recipient_id: str, profile: Mapping[str, Any] | None = None) -> JSON:
        """Replace the stored profile, creating it if needed."""
        return self._call(
            REPLACE_PROFILE, segments={"recipient_id": recipient_id}, params=ProfileParams(profile=profile)
        )

    def get_profile_lists(self, recipient_id: str, cursor: str | None = None) -> JSON:
        """Get the lists a recipient is subscribed to."""
        return self._call(GET_PROFILE_LISTS, segments={"recipient_id": recipient_id}, query={"cursor": cursor})

    # Preferences

    def get_preferences(self, recipient_id: str, preferred_channel: str) -> JSON:
        return self._call(
            GET_PREFERENCES,
            segments={"recipient_id": recipient_id},
            params=PreferencesParams(preferred_channel=preferred_channel),
        )

    def update_preferences(self, recipient_id: str, preferred_channel: str) -> JSON:
        """Replace a recipient's preferences, creating them if needed."""
        return self._call(
            UPDATE_PREFERENCES,
            segments={"recipient_id": recipient_id},
            params=PreferencesParams(preferred_channel=preferred_channel),
        )
