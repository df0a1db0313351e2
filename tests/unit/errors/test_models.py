"""Tests for the error body model."""

import pytest

from courier_client.errors.models import ErrorDetail


@pytest.mark.unit
def test_parse_courier_error_body():
    """Test parsing Courier's {"message", "type"} error body."""
    detail = ErrorDetail.from_body(b'{"message": "Unauthorized", "type": "authentication_error"}')

    assert detail is not None
    assert detail.message == "Unauthorized"
    assert detail.type == "authentication_error"
    assert detail.extensions is None


@pytest.mark.unit
def test_parse_rfc7807_body():
    """Test parsing an RFC 7807 formatted body."""
    detail = ErrorDetail.from_body(
        b'{"type": "https://api.example.com/problems/validation-error",'
        b' "title": "Request validation failed", "status": 400,'
        b' "detail": "The request body contains invalid data", "instance": "/send"}'
    )

    assert detail.title == "Request validation failed"
    assert detail.status == 400
    assert detail.detail == "The request body contains invalid data"
    assert detail.instance == "/send"


@pytest.mark.unit
def test_parse_with_extensions():
    """Test that unknown fields end up in extensions."""
    detail = ErrorDetail.from_body(b'{"message": "Bad", "errors": [{"field": "event"}], "request_id": "abc-123"}')

    assert detail.extensions == {"errors": [{"field": "event"}], "request_id": "abc-123"}


@pytest.mark.unit
@pytest.mark.parametrize("raw_body", [b"", b"Internal Server Error", b"[1, 2]", b'"just a string"', b"\xff\xfe"])
def test_non_object_bodies_return_none(raw_body):
    """Test that bodies which are not JSON objects give None."""
    assert ErrorDetail.from_body(raw_body) is None


@pytest.mark.unit
def test_to_exception_message_with_message_only():
    assert ErrorDetail(message="not found").to_exception_message() == "not found"


@pytest.mark.unit
def test_to_exception_message_full():
    """Test converting a full error body to an exception message."""
    detail = ErrorDetail(
        title="Validation Failed",
        detail="Email is invalid",
        type="https://api.example.com/problems/validation",
        instance="/profiles/user_1",
        extensions={"request_id": "abc-123"},
    )

    message = detail.to_exception_message()

    assert "Validation Failed" in message
    assert "Email is invalid" in message
    assert "Error Type: https://api.example.com/problems/validation" in message
    assert "Instance: /profiles/user_1" in message
    assert "request_id: abc-123" in message


@pytest.mark.unit
def test_to_exception_message_detail_not_repeated():
    """Test that detail is not repeated when it is the summary."""
    message = ErrorDetail(detail="Something broke").to_exception_message()
    assert message == "Something broke"


@pytest.mark.unit
def test_to_exception_message_empty():
    """Test fallback message when nothing is set."""
    assert ErrorDetail().to_exception_message() == "Unknown API error"
