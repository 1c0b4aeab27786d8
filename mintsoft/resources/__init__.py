"""
API resources: groups of related operations against one API area.
"""

from .auth import AuthResource
from .base import BaseResource
from .orders import Orders
from .returns import Returns

__all__ = ["AuthResource", "BaseResource", "Orders", "Returns"]
