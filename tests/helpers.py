"""Shared test doubles for the ODX proxy client tests."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

TEST_BASE_URL = "http://proxy.test"
TEST_PROXY_API_KEY = "proxy-secret-key-0001"
TEST_ODOO_API_KEY = "odoo-secret-key-0002"


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str]
    content: bytes


class RecordingTransport:
    """In-memory transport returning a canned response or raising."""

    def __init__(
        self,
        response: httpx.Response | None = None,
        *,
        exc: BaseException | None = None,
        handler: Callable[[RecordedCall], Awaitable[httpx.Response]] | None = None,
    ) -> None:
        self.response = response
        self.exc = exc
        self.handler = handler
        self.calls: list[RecordedCall] = []

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes,
    ) -> httpx.Response:
        call = RecordedCall(method, url, dict(headers), content)
        self.calls.append(call)
        if self.exc is not None:
            raise self.exc
        if self.handler is not None:
            return await self.handler(call)
        assert self.response is not None
        return self.response


class UnreadableResponse(httpx.Response):
    """Response whose body cannot be read."""

    async def aread(self) -> bytes:
        raise httpx.ReadError("connection reset while reading body")


def json_response(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def text_response(status_code: int, text: str) -> httpx.Response:
    return httpx.Response(status_code, content=text.encode("utf-8"))
