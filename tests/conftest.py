from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Tuple

import httpx
import pytest

from mintsoft import AuthClient, Client

BASE_URL = "https://api.mintsoft.co.uk"


class MockAPI:
    """Routes requests by (method, path) to canned responses and records them."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Tuple[int, Dict[str, Any]]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, **response_kwargs: Any) -> None:
        self.routes[(method.upper(), path)] = (status, response_kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(599, json={"error": f"no route for {key}"})
        status, kwargs = self.routes[key]
        return httpx.Response(status, **kwargs)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def api() -> MockAPI:
    return MockAPI()


@pytest.fixture
def client(api: MockAPI) -> Iterator[Client]:
    c = Client(token="test_token", conn_opts={"transport": api.transport})
    yield c
    c.close()


@pytest.fixture
def auth_client(api: MockAPI) -> Iterator[AuthClient]:
    c = AuthClient(conn_opts={"transport": api.transport})
    yield c
    c.close()
