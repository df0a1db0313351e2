"""Tests for request building and query encoding."""

import json
from types import MappingProxyType

import pytest

from courier_client.auth import BasicCredentials, BearerCredentials
from courier_client.request import USER_AGENT, HttpMethod, RequestBuilder, build_query, quote_segment


@pytest.fixture
def builder():
    return RequestBuilder("https://api.courier.com/", BearerCredentials("pk_test"))


class TestRequestBuilder:
    """Test RequestBuilder.build()."""

    @pytest.mark.unit
    def test_url_joins_base_and_path(self, builder):
        request = builder.build(HttpMethod.GET, "messages/1-abc")
        assert request.url == "https://api.courier.com/messages/1-abc"

    @pytest.mark.unit
    def test_base_url_without_trailing_slash(self):
        builder = RequestBuilder("http://localhost:8080", BearerCredentials("pk"))

        request = builder.build(HttpMethod.GET, "events")

        assert request.url == "http://localhost:8080/events"

    @pytest.mark.unit
    def test_standard_headers(self, builder):
        request = builder.build(HttpMethod.POST, "send", {"event": "welcome"})

        assert list(request.headers) == ["Authorization", "Content-Type", "User-Agent"]
        assert request.headers["Authorization"] == "Bearer pk_test"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"] == USER_AGENT

    @pytest.mark.unit
    def test_basic_auth_header(self):
        builder = RequestBuilder("https://api.courier.com/", BasicCredentials("user", "pass"))

        request = builder.build(HttpMethod.GET, "events")

        assert request.headers["Authorization"] == "Basic dXNlcjpwYXNz"

    @pytest.mark.unit
    def test_no_credentials_sends_empty_authorization(self):
        builder = RequestBuilder("https://api.courier.com/")

        request = builder.build(HttpMethod.GET, "events")

        assert request.headers["Authorization"] == ""

    @pytest.mark.unit
    def test_idempotency_key_header(self, builder):
        request = builder.build(HttpMethod.POST, "send", {"event": "e"}, idempotency_key="abc-123")

        assert request.headers["Idempotency-Key"] == "abc-123"
        assert list(request.headers)[-1] == "Idempotency-Key"

    @pytest.mark.unit
    @pytest.mark.parametrize("key", [None, ""])
    def test_idempotency_key_omitted_when_absent_or_empty(self, builder, key):
        request = builder.build(HttpMethod.POST, "send", {"event": "e"}, idempotency_key=key)
        assert "Idempotency-Key" not in request.headers

    @pytest.mark.unit
    def test_body_is_json(self, builder):
        params = {"event": "welcome", "data": {"name": "Ada", "count": 2}}

        request = builder.build(HttpMethod.POST, "send", params)

        assert json.loads(request.body) == params
        assert request.json() == params

    @pytest.mark.unit
    def test_empty_mapping_encodes_as_object(self, builder):
        request = builder.build(HttpMethod.POST, "send", {})
        assert request.body == b"{}"

    @pytest.mark.unit
    @pytest.mark.parametrize("method", [HttpMethod.PUT, HttpMethod.DELETE, HttpMethod.POST, HttpMethod.PATCH])
    def test_non_get_without_params_sends_empty_object(self, builder, method):
        request = builder.build(method, "lists/l1/restore")
        assert request.body == b"{}"

    @pytest.mark.unit
    def test_get_without_params_has_no_body(self, builder):
        request = builder.build(HttpMethod.GET, "messages?cursor=abc")

        assert request.body is None
        assert request.json() is None

    @pytest.mark.unit
    def test_get_with_params_keeps_body(self, builder):
        request = builder.build(HttpMethod.GET, "preferences/u1", {"preferred_channel": "email"})
        assert request.json() == {"preferred_channel": "email"}

    @pytest.mark.unit
    def test_string_method_is_normalised(self, builder):
        assert builder.build("post", "send", {}).method is HttpMethod.POST

    @pytest.mark.unit
    def test_non_ascii_body_is_utf8(self, builder):
        request = builder.build(HttpMethod.POST, "send", {"data": {"name": "Zoë"}})

        assert "Zoë".encode("utf-8") in request.body
        assert request.json()["data"]["name"] == "Zoë"

    @pytest.mark.unit
    def test_read_only_mappings_and_tuples_encode(self, builder):
        """Any Mapping or Sequence in the body should encode like dict and list."""
        params = {"data": MappingProxyType({"a": 1}), "items": ("x", "y"), "nested": [MappingProxyType({"b": ()})]}

        request = builder.build(HttpMethod.POST, "send", params)

        assert request.json() == {"data": {"a": 1}, "items": ["x", "y"], "nested": [{"b": []}]}

    @pytest.mark.unit
    def test_unserializable_values_still_raise(self, builder):
        with pytest.raises(TypeError):
            builder.build(HttpMethod.POST, "send", {"data": object()})

    @pytest.mark.unit
    def test_request_is_immutable(self, builder):
        request = builder.build(HttpMethod.GET, "events")
        with pytest.raises(AttributeError):
            request.url = "https://evil.test/"

    @pytest.mark.unit
    def test_each_build_gets_fresh_headers(self, builder):
        first = builder.build(HttpMethod.POST, "send", {}, idempotency_key="k1")
        second = builder.build(HttpMethod.POST, "send", {})

        assert "Idempotency-Key" in first.headers
        assert "Idempotency-Key" not in second.headers


class TestBuildQuery:
    """Test query string encoding."""

    @pytest.mark.unit
    def test_drops_none(self):
        assert build_query({"cursor": None, "event": "welcome"}) == "event=welcome"

    @pytest.mark.unit
    def test_keeps_empty_string(self):
        assert build_query({"cursor": "", "pattern": None}) == "cursor="

    @pytest.mark.unit
    def test_space_is_percent_encoded(self):
        assert build_query({"pattern": "team alpha"}) == "pattern=team%20alpha"

    @pytest.mark.unit
    def test_reserved_characters_are_encoded(self):
        assert build_query({"recipient": "a&b=c/d"}) == "recipient=a%26b%3Dc%2Fd"

    @pytest.mark.unit
    def test_preserves_declaration_order(self):
        query = build_query({"cursor": "c1", "event": "e1", "list": "l1"})
        assert query == "cursor=c1&event=e1&list=l1"

    @pytest.mark.unit
    def test_all_none_gives_empty_string(self):
        assert build_query({"cursor": None}) == ""


@pytest.mark.unit
def test_quote_segment():
    assert quote_segment("user_1") == "user_1"
    assert quote_segment("team/alpha beta") == "team%2Falpha%20beta"
