"""
Response objects for the Mintsoft API.
"""

from .base import FrozenDict, FrozenList, ResponseObject, deep_freeze, underscore
from .order import Order
from .return_ import Return
from .return_reason import ReturnReason

__all__ = [
    "FrozenDict",
    "FrozenList",
    "Order",
    "Return",
    "ReturnReason",
    "ResponseObject",
    "deep_freeze",
    "underscore",
]
