"""
Core helpers package for the Mintsoft API wrapper.

Holds configuration and the error hierarchy shared by every resource.
"""

__all__ = []
