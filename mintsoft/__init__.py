"""
mintsoft
--------

Thin client for the Mintsoft warehouse-management API: token
authentication, order search, return reasons, return creation and
return items.
"""

from .auth_client import AuthClient
from .client import Client
from .core.errors import (
    APIError,
    AuthenticationError,
    MintsoftError,
    NotFoundError,
    ValidationError,
)
from .logging_config import setup_logging
from .objects import Order, ResponseObject, Return, ReturnReason

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AuthClient",
    "AuthenticationError",
    "Client",
    "MintsoftError",
    "NotFoundError",
    "Order",
    "ResponseObject",
    "Return",
    "ReturnReason",
    "ValidationError",
    "setup_logging",
]
