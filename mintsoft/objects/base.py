"""
objects/base.py
---------------

Attribute-access wrapper around decoded JSON payloads.

A :class:`ResponseObject` exposes the keys of a JSON object as
attributes after converting them to snake_case (``"OrderNumber"``
becomes ``order_number``).  Nested objects become nested
ResponseObjects, arrays become lists of wrapped elements, scalars pass
through untouched.  Missing attributes read as ``None``.

Alongside the normalised view each instance keeps the payload exactly
as it was received, deep-frozen, under ``original_response``.  The
frozen containers subclass ``dict`` and ``list`` so they still compare
equal to plain JSON data, but every mutating method raises
``TypeError``.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterator, Mapping

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(key: str) -> str:
    """Convert a CamelCase / camelCase key to snake_case.

    >>> underscore("CustomerID")
    'customer_id'
    """
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    key = _WORD_BOUNDARY.sub(r"\1_\2", key)
    return key.replace("-", "_").lower()


def _immutable(self: Any, *args: Any, **kwargs: Any) -> None:
    raise TypeError(f"{type(self).__name__} is immutable")


class FrozenDict(dict):
    """Read-only ``dict``."""

    __setitem__ = __delitem__ = _immutable
    clear = pop = popitem = setdefault = update = _immutable
    __ior__ = _immutable

    def __reduce__(self):
        return (type(self), (dict(self),))


class FrozenList(list):
    """Read-only ``list``."""

    __setitem__ = __delitem__ = _immutable
    append = extend = insert = pop = remove = clear = sort = reverse = _immutable
    __iadd__ = __imul__ = _immutable

    def __reduce__(self):
        return (type(self), (list(self),))


def deep_freeze(value: Any) -> Any:
    """Return a deep, read-only copy of a JSON value."""
    if isinstance(value, Mapping):
        return FrozenDict((k, deep_freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return FrozenList(deep_freeze(v) for v in value)
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, ResponseObject):
        return value.to_hash()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


class ResponseObject:
    """Normalised, attribute-accessible view of one JSON object."""

    __slots__ = ("_attributes", "_original")

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise TypeError(
                f"{type(self).__name__} expects a JSON object, got {type(data).__name__}"
            )
        object.__setattr__(self, "_original", deep_freeze(data))
        attributes: Dict[str, Any] = {}
        for key, value in data.items():
            attributes[underscore(str(key))] = ResponseObject.wrap(value)
        object.__setattr__(self, "_attributes", attributes)

    @classmethod
    def wrap(cls, value: Any) -> Any:
        """Apply the wrapping rule to any JSON value.

        Objects become instances of ``cls``, arrays become lists of
        wrapped elements and scalars are returned as they are.
        """
        if isinstance(value, Mapping):
            return cls(value)
        if isinstance(value, (list, tuple)):
            return [cls.wrap(v) for v in value]
        return value

    @property
    def original_response(self) -> Any:
        """The payload exactly as received, deep-frozen."""
        return self._original

    def to_hash(self) -> Dict[str, Any]:
        """Plain nested dict of the normalised (snake_case) view."""
        return {key: _plain(value) for key, value in self._attributes.items()}

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in ResponseObject.__slots__:
            raise AttributeError(name)
        return self._attributes.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponseObject):
            return NotImplemented
        return self.to_hash() == other.to_hash()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._attributes.items())
        return f"{type(self).__name__}({fields})"

    def __reduce__(self):
        return (type(self), (dict(self._original),))
