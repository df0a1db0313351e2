"""Declarative catalog of Courier API endpoints.

An `Endpoint` says how to reach an operation: method, path template, and
whether the API honours an `Idempotency-Key` for it. `CourierClient`
methods only assemble parameters and look their endpoint up here.
"""

from dataclasses import dataclass

from courier_client.request import HttpMethod, quote_segment


@dataclass(frozen=True)
class Endpoint:
    """One remote operation."""

    name: str
    method: HttpMethod
    path: str
    idempotent: bool = False

    def format_path(self, **segments: str) -> str:
        """Fill `{placeholders}` in the path, percent-encoding each value."""
        return self.path.format(**{key: quote_segment(value) for key, value in segments.items()})


# Send
SEND = Endpoint("send", HttpMethod.POST, "send", idempotent=True)
SEND_LIST = Endpoint("send_list", HttpMethod.POST, "send/list", idempotent=True)

# Messages
LIST_MESSAGES = Endpoint("list_messages", HttpMethod.GET, "messages")
GET_MESSAGE = Endpoint("get_message", HttpMethod.GET, "messages/{message_id}")
GET_MESSAGE_HISTORY = Endpoint("get_message_history", HttpMethod.GET, "messages/{message_id}/history")

# Lists
LIST_LISTS = Endpoint("list_lists", HttpMethod.GET, "lists")
GET_LIST = Endpoint("get_list", HttpMethod.GET, "lists/{list_id}")
PUT_LIST = Endpoint("put_list", HttpMethod.PUT, "lists/{list_id}")
DELETE_LIST = Endpoint("delete_list", HttpMethod.DELETE, "lists/{list_id}")
RESTORE_LIST = Endpoint("restore_list", HttpMethod.PUT, "lists/{list_id}/restore")

# List subscriptions
LIST_SUBSCRIPTIONS = Endpoint("list_subscriptions", HttpMethod.GET, "lists/{list_id}/subscriptions")
PUT_SUBSCRIPTIONS = Endpoint("put_subscriptions", HttpMethod.PUT, "lists/{list_id}/subscriptions")
PUT_SUBSCRIPTION = Endpoint("put_subscription", HttpMethod.PUT, "lists/{list_id}/subscriptions/{recipient_id}")
DELETE_SUBSCRIPTION = Endpoint(
    "delete_subscription", HttpMethod.DELETE, "lists/{list_id}/subscriptions/{recipient_id}"
)

# Brands
LIST_BRANDS = Endpoint("list_brands", HttpMethod.GET, "brands")
CREATE_BRAND = Endpoint("create_brand", HttpMethod.POST, "brands", idempotent=True)
GET_BRAND = Endpoint("get_brand", HttpMethod.GET, "brands/{brand_id}")
REPLACE_BRAND = Endpoint("replace_brand", HttpMethod.PUT, "brands/{brand_id}")
DELETE_BRAND = Endpoint("delete_brand", HttpMethod.DELETE, "brands/{brand_id}")

# Events
LIST_EVENTS = Endpoint("list_events", HttpMethod.GET, "events")
GET_EVENT = Endpoint("get_event", HttpMethod.GET, "events/{event_id}")
PUT_EVENT = Endpoint("put_event", HttpMethod.PUT, "events/{event_id}")

# Profiles
GET_PROFILE = Endpoint("get_profile", HttpMethod.GET, "profiles/{recipient_id}")
UPSERT_PROFILE = Endpoint("upsert_profile", HttpMethod.POST, "profiles/{recipient_id}")
PATCH_PROFILE = Endpoint("patch_profile", HttpMethod.PATCH, "profiles/{recipient_id}")
REPLACE_PROFILE = Endpoint("replace_profile", HttpMethod.PUT, "profiles/{recipient_id}")
GET_PROFILE_LISTS = Endpoint("get_profile_lists", HttpMethod.GET, "profiles/{recipient_id}/lists")

# Preferences
GET_PREFERENCES = Endpoint("get_preferences", HttpMethod.GET, "preferences/{recipient_id}")
UPDATE_PREFERENCES = Endpoint("update_preferences", HttpMethod.PUT, "preferences/{recipient_id}")
