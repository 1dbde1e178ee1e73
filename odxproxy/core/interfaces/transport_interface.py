from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class ITransport(Protocol):
    """Performs one HTTP exchange for the client.

    Implementations raise if no HTTP response could be obtained at all
    (DNS failure, refused connection, timeout). Any response that does
    arrive, whatever its status, must be returned.
    """

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes,
    ) -> httpx.Response: ...
