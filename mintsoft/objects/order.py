"""
objects/order.py
----------------

Order as returned by ``/api/Order/Search`` and ``/api/Order/{id}``.
"""

from __future__ import annotations

from .base import ResponseObject


class Order(ResponseObject):
    """An order.  Exposes only what the server sent."""

    __slots__ = ()
