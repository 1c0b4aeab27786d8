"""
resources/orders.py
-------------------

Order lookups.

Absence is reported without raising: a search that matches nothing
(or answers 404) gives an empty list, a single-order lookup that
answers 404 gives ``None``.
"""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from mintsoft.core.errors import ValidationError
from mintsoft.logging_config import log_call
from mintsoft.objects.order import Order
from mintsoft.resources.base import BaseResource

SEARCH_PATH = "/api/Order/Search"
ORDER_PATH = "/api/Order/{id}"


class Orders(BaseResource):
    @log_call
    def search(self, order_number: str) -> List[Order]:
        """Find orders by order number.

        :raises ValidationError: empty or missing order number
        """
        if not isinstance(order_number, str) or not order_number:
            raise ValidationError("Order number required")

        response = self.get_request(SEARCH_PATH, {"OrderNumber": order_number})
        if response.status_code == 404:
            return []
        data = self.handle_response(response)
        if not isinstance(data, list):
            return []
        return [Order(item) for item in data if isinstance(item, dict)]

    @log_call
    def retrieve(self, id) -> Optional[Order]:
        if id is None or id == "":
            raise ValidationError("ID must be present")

        response = self.get_request(ORDER_PATH.format(id=quote(str(id), safe="")))
        if response.status_code == 404:
            return None
        data = self.handle_response(response)
        if not isinstance(data, dict):
            return None
        return Order(data)
