"""
Pydantic models for request bodies sent to the Mintsoft API.
"""

from .auth import Credentials
from .returns import ReturnItemPayload

__all__ = ["Credentials", "ReturnItemPayload"]
