"""Tests for the orders resource."""

from __future__ import annotations

import pytest

from mintsoft import Order, ValidationError


SEARCH_PATH = "/api/Order/Search"


def test_search_wraps_each_order(api, client):
    api.add("GET", SEARCH_PATH, json=[
        {"ID": 1, "OrderNumber": "ORD-123", "CustomerID": 9},
        {"ID": 2, "OrderNumber": "ORD-123-B"},
    ])
    orders = client.orders.search("ORD-123")

    assert len(orders) == 2
    assert all(type(o) is Order for o in orders)
    assert [o.id for o in orders] == [1, 2]
    assert [o.order_number for o in orders] == ["ORD-123", "ORD-123-B"]
    assert orders[0].to_hash() == {"id": 1, "order_number": "ORD-123", "customer_id": 9}
    assert orders[1].to_hash() == {"id": 2, "order_number": "ORD-123-B"}
    assert orders[1].customer_id is None
    assert orders[1].order_id is None
    assert orders[0].original_response == {"ID": 1, "OrderNumber": "ORD-123", "CustomerID": 9}

    request = api.last_request
    assert request.method == "GET"
    assert request.url.path == SEARCH_PATH
    assert dict(request.url.params) == {"OrderNumber": "ORD-123"}


@pytest.mark.parametrize("order_number", ["", None, 123])
def test_search_requires_order_number(api, client, order_number):
    with pytest.raises(ValidationError, match="^Order number required$"):
        client.orders.search(order_number)
    assert api.requests == []


def test_search_404_is_empty(api, client):
    api.add("GET", SEARCH_PATH, 404, json={"error": "Not found"})
    assert client.orders.search("NOPE") == []


@pytest.mark.parametrize("body", [{"json": {"ID": 1}}, {"json": None}, {"text": "ok"}])
def test_search_non_list_body_is_empty(api, client, body):
    api.add("GET", SEARCH_PATH, **body)
    assert client.orders.search("ORD-1") == []


def test_search_empty_list(api, client):
    api.add("GET", SEARCH_PATH, json=[])
    assert client.orders.search("ORD-1") == []


def test_retrieve(api, client):
    api.add("GET", "/api/Order/42", json={"ID": 42, "OrderNumber": "ORD-42"})
    order = client.orders.retrieve(42)
    assert type(order) is Order
    assert order.id == 42
    assert order.order_number == "ORD-42"


def test_retrieve_404_is_none(api, client):
    api.add("GET", "/api/Order/999", 404, json={"error": "Order not found"})
    assert client.orders.retrieve(999) is None


def test_retrieve_non_map_body_is_none(api, client):
    api.add("GET", "/api/Order/5", json=[{"ID": 5}])
    assert client.orders.retrieve(5) is None


@pytest.mark.parametrize("order_id", [None, ""])
def test_retrieve_requires_id(api, client, order_id):
    with pytest.raises(ValidationError, match="^ID must be present$"):
        client.orders.retrieve(order_id)
    assert api.requests == []


def test_retrieve_escapes_id_in_path(api, client):
    api.add("GET", "/api/Order/1/../Search", 404)
    assert client.orders.retrieve("1/../Search") is None
    assert api.last_request.url.raw_path == b"/api/Order/1%2F..%2FSearch"
