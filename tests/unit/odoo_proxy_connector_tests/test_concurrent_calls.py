from __future__ import annotations

import asyncio
import json
from collections.abc import Callable

import httpx
import pytest

from odxproxy.connectors.odoo_proxy import OdooProxyApiClient
from odxproxy.core.common.exceptions import OdooProxyApiFormatError
from odxproxy.core.domain.odoo_proxy import OdooProxyRequest
from tests.helpers import RecordedCall, RecordingTransport


async def _echo_after_delay(call: RecordedCall) -> httpx.Response:
    body = json.loads(call.content)
    index = int(body["id"].split("-")[1])
    # Later requests finish first so responses interleave
    await asyncio.sleep(0.001 * (10 - index))
    if index == 3:
        return httpx.Response(200, content=b"")
    return httpx.Response(
        200, json={"jsonrpc": "2.0", "id": body["id"], "result": index * 10}
    )


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_interfere(
    make_client: Callable[[RecordingTransport], OdooProxyApiClient],
    sample_request: OdooProxyRequest,
) -> None:
    transport = RecordingTransport(handler=_echo_after_delay)
    client = make_client(transport)
    requests = [
        sample_request.model_copy(update={"id": f"req-{i}"}) for i in range(10)
    ]

    results = await asyncio.gather(
        *(client.forward_to_odoo(r) for r in requests), return_exceptions=True
    )

    assert len(transport.calls) == 10
    for i, outcome in enumerate(results):
        if i == 3:
            assert isinstance(outcome, OdooProxyApiFormatError)
        else:
            assert outcome == {"jsonrpc": "2.0", "id": f"req-{i}", "result": i * 10}
