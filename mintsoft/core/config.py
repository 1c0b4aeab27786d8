"""
core/config.py
----------------

Environment-backed settings for the Mintsoft clients.

Defines strongly-typed settings loaded with ``pydantic-settings``.
Nothing in the library reads them implicitly: they are only consulted
by ``Client.from_env`` and ``AuthClient.from_env``, each of which
builds a fresh :class:`Settings` instance.  Explicit constructor
arguments remain the primary way to configure a client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.mintsoft.co.uk"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Variables are prefixed with ``MINTSOFT_``.  For example, to point
    the clients at a sandbox set ``MINTSOFT_BASE_URL=https://sandbox.example``.
    """

    token: Optional[str] = Field(None, description="Bearer token returned by /api/auth.")
    base_url: str = Field(DEFAULT_BASE_URL, min_length=1, description="API base URL.")
    timeout: Optional[float] = Field(
        None, gt=0, description="Request timeout in seconds; transport default when unset."
    )

    model_config = SettingsConfigDict(env_prefix="MINTSOFT_", env_file=None, case_sensitive=False)

    def conn_opts(self) -> Dict[str, Any]:
        """Transport options derived from these settings."""
        opts: Dict[str, Any] = {}
        if self.timeout is not None:
            opts["timeout"] = self.timeout
        return opts
