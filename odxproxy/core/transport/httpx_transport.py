from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpxTransport:
    """Default transport backed by ``httpx.AsyncClient``.

    When no client is injected a short-lived one is opened for each call,
    so nothing is pooled between requests. Pass a shared client to reuse
    connections; its lifecycle then belongs to the caller.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self._timeout = timeout

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes,
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(
                method, url, headers=dict(headers), content=content
            )

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            # Non-streaming request: the body is fully read before the client closes
            return await client.request(
                method, url, headers=dict(headers), content=content
            )


def resolve_default_transport(timeout: float | None = None) -> HttpxTransport:
    """Build the transport used when a client config does not supply one."""
    if timeout is None:
        timeout = DEFAULT_TIMEOUT_SECONDS
    logger.debug("Using default httpx transport (timeout=%s)", timeout)
    return HttpxTransport(timeout=timeout)
