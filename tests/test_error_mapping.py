"""Status-to-error classification for every operation sharing BaseResource."""

from __future__ import annotations

import pytest

from mintsoft import APIError, AuthenticationError, NotFoundError, ValidationError
from mintsoft.resources.base import extract_error_message, positive_int

RAISES = object()

ITEM = {"product_id": 1, "quantity": 1, "reason_id": 1}

OPERATIONS = {
    "orders.search": ("GET", "/api/Order/Search", lambda c: c.orders.search("ORD-1"), []),
    "orders.retrieve": ("GET", "/api/Order/7", lambda c: c.orders.retrieve(7), None),
    "returns.reasons": ("GET", "/api/Return/Reasons", lambda c: c.returns.reasons(), RAISES),
    "returns.create": ("POST", "/api/Return/CreateReturn/7", lambda c: c.returns.create(7), RAISES),
    "returns.add_item": (
        "POST", "/api/Return/7/AddItem", lambda c: c.returns.add_item(7, ITEM), RAISES,
    ),
    "returns.retrieve": ("GET", "/api/Return/7", lambda c: c.returns.retrieve(7), None),
}

STATUSES = [
    (400, ValidationError, "Invalid request data: bad input"),
    (401, AuthenticationError, "Invalid or expired token"),
    (403, APIError, "API error: 403 - bad input"),
    (409, APIError, "API error: 409 - bad input"),
    (422, APIError, "API error: 422 - bad input"),
    (500, APIError, "API error: 500 - bad input"),
    (503, APIError, "API error: 503 - bad input"),
]


@pytest.mark.parametrize("operation", sorted(OPERATIONS))
@pytest.mark.parametrize("status, error_class, message", STATUSES)
def test_status_mapping(api, client, operation, status, error_class, message):
    method, path, call, _ = OPERATIONS[operation]
    api.add(method, path, status, json={"error": "bad input"})

    with pytest.raises(APIError) as exc_info:
        call(client)

    error = exc_info.value
    assert type(error) is error_class
    assert str(error) == message
    assert error.message == message
    assert error.status_code == status
    assert error.response.status_code == status


@pytest.mark.parametrize("operation", sorted(OPERATIONS))
def test_not_found_policy(api, client, operation):
    method, path, call, not_found = OPERATIONS[operation]
    api.add(method, path, 404, json={"error": "Not found"})

    if not_found is RAISES:
        with pytest.raises(NotFoundError, match="^Resource not found$") as exc_info:
            call(client)
        assert exc_info.value.status_code == 404
    else:
        assert call(client) == not_found


@pytest.mark.parametrize(
    "body, expected",
    [
        ("plain text", "plain text"),
        ("", ""),
        ({"error": "E", "message": "M"}, "E"),
        ({"message": "M"}, "M"),
        ({"Detail": "x"}, "{'Detail': 'x'}"),
        ([1, 2], "Unknown error"),
        (None, "Unknown error"),
    ],
)
def test_extract_error_message(body, expected):
    assert extract_error_message(body) == expected


def test_message_from_text_body(api, client):
    api.add("GET", "/api/Return/Reasons", 502, text="Bad gateway")
    with pytest.raises(APIError, match="^API error: 502 - Bad gateway$"):
        client.returns.reasons()


@pytest.mark.parametrize(
    "value, expected",
    [(1, 1), ("42", 42), (4.0, 4), (0, None), (-1, None), ("x", None),
     (None, None), (True, None), ("", None)],
)
def test_positive_int(value, expected):
    assert positive_int(value) == expected


def test_hierarchy():
    for cls in (AuthenticationError, NotFoundError, ValidationError):
        assert issubclass(cls, APIError)
