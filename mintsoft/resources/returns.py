"""
resources/returns.py
--------------------

Return reasons, return creation and return items.

``create`` is the one call that adds a field to a server response:
the create endpoint does not echo the order id, so ``order_id`` is
merged into the returned :class:`Return`.  ``add_item`` returns the
server body as is, without the return id or item attributes.

A 404 from ``create`` or ``add_item`` raises ``NotFoundError``;
``retrieve`` reports it as ``None``.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional

import httpx

from mintsoft.core.errors import APIError, ValidationError
from mintsoft.logging_config import log_call
from mintsoft.objects.return_ import Return
from mintsoft.objects.return_reason import ReturnReason
from mintsoft.resources.base import BaseResource, positive_int
from mintsoft.schemas.returns import ReturnItemPayload

REASONS_PATH = "/api/Return/Reasons"
CREATE_PATH = "/api/Return/CreateReturn/{order_id}"
ADD_ITEM_PATH = "/api/Return/{return_id}/AddItem"
RETURN_PATH = "/api/Return/{return_id}"

REQUIRED_ITEM_FIELDS = ("product_id", "quantity", "reason_id")


def _require_mapping(data: Any, response: httpx.Response) -> dict:
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError:
            pass
    if not isinstance(data, dict):
        raise APIError(
            f"Unexpected response payload: {type(data).__name__}",
            response=response,
            status_code=response.status_code,
        )
    return data


class Returns(BaseResource):
    @log_call
    def reasons(self) -> List[ReturnReason]:
        """List the reasons a return can be raised for."""
        data = self.handle_response(self.get_request(REASONS_PATH))
        if not isinstance(data, list):
            return []
        return [ReturnReason(item) for item in data if isinstance(item, dict)]

    @log_call
    def create(self, order_id: Any) -> Return:
        """Open a return against an order.

        :param order_id: the order's numeric id (``int`` or numeric ``str``)
        :raises ValidationError: ``order_id`` is not a positive integer
        :return: the created return, including ``order_id``
        """
        order_id = positive_int(order_id)
        if order_id is None:
            raise ValidationError("Order ID required")

        response = self.post_request(CREATE_PATH.format(order_id=order_id))
        data = _require_mapping(self.handle_response(response), response)
        return Return({**data, "order_id": order_id})

    @log_call
    def add_item(self, return_id: Any, item_attributes: Mapping[str, Any]) -> Return:
        """Add an item to an open return.

        ``item_attributes`` takes ``product_id``, ``quantity`` and
        ``reason_id`` (required) plus optional ``unit_value`` and
        ``notes``.

        :raises ValidationError: invalid return id, missing required
            attribute or non-positive quantity
        """
        return_id = positive_int(return_id)
        if return_id is None:
            raise ValidationError("Return ID required")
        if not isinstance(item_attributes, Mapping):
            raise ValidationError(f"{REQUIRED_ITEM_FIELDS[0]} required")
        for field in REQUIRED_ITEM_FIELDS:
            if item_attributes.get(field) is None:
                raise ValidationError(f"{field} required")
        if positive_int(item_attributes["quantity"]) is None:
            raise ValidationError("Quantity must be positive")

        payload = ReturnItemPayload(
            product_id=item_attributes["product_id"],
            quantity=item_attributes["quantity"],
            reason_id=item_attributes["reason_id"],
            unit_value=item_attributes.get("unit_value"),
            notes=item_attributes.get("notes"),
        )
        response = self.post_request(ADD_ITEM_PATH.format(return_id=return_id), payload.to_wire())
        data = _require_mapping(self.handle_response(response), response)
        return Return(data)

    @log_call
    def retrieve(self, return_id: Any) -> Optional[Return]:
        return_id = positive_int(return_id)
        if return_id is None:
            raise ValidationError("Return ID required")

        response = self.get_request(RETURN_PATH.format(return_id=return_id))
        if response.status_code == 404:
            return None
        data = self.handle_response(response)
        if not isinstance(data, dict):
            return None
        return Return(data)
