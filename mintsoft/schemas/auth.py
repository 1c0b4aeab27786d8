"""
schemas/auth.py
----------------

Request body for ``POST /api/auth``.
"""

from __future__ import annotations

from pydantic import BaseModel


class Credentials(BaseModel):
    username: str
    password: str
