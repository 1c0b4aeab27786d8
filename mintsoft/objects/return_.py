"""
objects/return_.py
------------------

Return as produced by the create-return, add-item and retrieve calls.

The module carries a trailing underscore because ``return`` is a
keyword.
"""

from __future__ import annotations

from .base import ResponseObject


class Return(ResponseObject):
    """A return.

    ``order_id`` is present on returns built by ``ReturnResource.create``
    even though the server does not echo it; every other field comes
    from the response body.
    """

    __slots__ = ()
