from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict

import httpx
import pytest

from tests.helpers import NOW


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def mock_transport() -> Callable[[Dict[str, object]], httpx.MockTransport]:
    """
    Build an httpx.MockTransport from a url -> response mapping.

    Values may be a str (served with 200), an int status code, an exception
    instance (raised), or an async callable taking the request.
    """

    def build(routes: Dict[str, object]) -> httpx.MockTransport:
        async def handler(request: httpx.Request) -> httpx.Response:
            route = routes[str(request.url)]
            if isinstance(route, BaseException):
                raise route
            if isinstance(route, int):
                return httpx.Response(route, text="error")
            if callable(route):
                return await route(request)
            return httpx.Response(200, text=route)

        return httpx.MockTransport(handler)

    return build
