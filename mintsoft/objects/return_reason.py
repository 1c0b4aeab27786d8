"""
objects/return_reason.py
------------------------

Entry of ``/api/Return/Reasons``.
"""

from __future__ import annotations

from .base import ResponseObject


class ReturnReason(ResponseObject):
    __slots__ = ()
