"""
Outbound HTTP clients for the Mintsoft API.
"""

from .http_client import HTTPClient, decode_body

__all__ = ["HTTPClient", "decode_body"]
