"""
logging_config.py
------------------

Shared logging utilities for the Mintsoft API wrapper.  Everything is
logged through Python's built-in ``logging`` module under the
``mintsoft`` logger, with each message serialised as a JSON object so
that downstream tooling (ELK, Datadog, ...) can parse it.

Being a library, importing this module never touches the root logger.
Applications that want console output call :func:`setup_logging` once.
The ``log_call`` decorator records entry and exit of resource
operations at DEBUG level without leaking sensitive information such
as tokens or passwords.
"""

from __future__ import annotations

import json
import logging
import sys
from functools import wraps
from typing import Any, Callable, Dict

logger = logging.getLogger("mintsoft")
logger.addHandler(logging.NullHandler())

SENSITIVE_KEYWORDS = ("token", "password", "secret")
SENSITIVE_HEADERS = {"authorization"}


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a stdout handler to the ``mintsoft`` logger.

    Safe to call multiple times; only the first call adds a handler.
    """
    logger.setLevel(level)
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Dictionaries lose any key containing 'token', 'password' or
    'secret'.  Lists and tuples are processed element-wise.  Response
    objects and pydantic models are logged through their plain dict
    form.  Anything else that is not JSON serialisable is logged via
    ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, dict):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if any(keyword in str(k).lower() for keyword in SENSITIVE_KEYWORDS):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    for method in ("to_hash", "model_dump"):
        dump = getattr(obj, method, None)
        if callable(dump):
            return _sanitize(dump())
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of resource operations.

    Emits a ``call_start`` event before the wrapped callable runs and a
    ``call_end`` event after it returns, both at DEBUG level.  The
    first positional argument (``self``) is not logged.  Exceptions
    raised by the wrapped callable propagate unchanged.

    Do not apply this to callables taking secrets positionally: only
    dict keys are scrubbed.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_start",
                "function": func.__qualname__,
                "args": _sanitize(args[1:]),
                "kwargs": _sanitize(kwargs),
            }))
        result = func(*args, **kwargs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(json.dumps({
                "event": "call_end",
                "function": func.__qualname__,
                "result": _sanitize(result),
            }))
        return result

    return wrapper


def log_http_request(method: str, url: str, *, headers: Dict[str, Any] | None = None,
                     params: Dict[str, Any] | None = None, json_body: Any = None,
                     status: int | None = None, duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Called by the HTTP gateway before sending (without ``status``) and
    after the response arrives (with ``status`` and ``duration_ms``).
    The ``Authorization`` header is never recorded.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": url,
    }
    if headers is not None:
        data["headers"] = {k: v for k, v in headers.items() if k.lower() not in SENSITIVE_HEADERS}
    if params:
        data["params"] = params
    if json_body:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
