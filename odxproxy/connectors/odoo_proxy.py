from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, cast

import httpx
from pydantic import BaseModel

from odxproxy.core.common.exceptions import (
    ConfigurationError,
    OdooProxyApiFormatError,
    OdooProxyApiHttpError,
)
from odxproxy.core.common.logging_utils import get_logger
from odxproxy.core.config.client_config import OdooApiClientConfig
from odxproxy.core.constants import (
    API_KEY_HEADER,
    ERROR_BODY_PREVIEW_CHARS,
    EXPECTED_PROXY_STATUS_CODES,
    JSONRPC_VERSION,
    ODOO_PROXY_PATH,
)
from odxproxy.core.domain.odoo_proxy import JsonRpcResponse, OdooProxyRequest
from odxproxy.core.interfaces.transport_interface import ITransport
from odxproxy.core.transport.httpx_transport import resolve_default_transport

logger = get_logger(__name__)


class OdooProxyApiClient:
    """Typed client for the ODX proxy ``/api/odoo`` endpoint.

    Build instances with :func:`create_odoo_proxy_client`. A client only
    holds its connection settings, so one instance can serve any number of
    concurrent ``forward_to_odoo`` calls.
    """

    __slots__ = ("_base_url", "_api_key", "_transport")

    def __init__(self, config: OdooApiClientConfig) -> None:
        if not config.base_url or not config.api_key:
            raise ConfigurationError(
                message="OdooProxyApiClient requires base_url and api_key in configuration."
            )

        transport = config.transport
        if transport is None:
            transport = resolve_default_transport(config.timeout)
        if not isinstance(transport, ITransport):
            raise ConfigurationError(
                message="No HTTP transport is available. Provide an async transport callable.",
                details={"transport": type(transport).__name__},
            )

        # Only one trailing slash is removed
        self._base_url: str = config.base_url.removesuffix("/")
        self._api_key: str = config.api_key
        self._transport: ITransport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> ITransport:
        return self._transport

    def __repr__(self) -> str:
        return f'<OdooProxyApiClient base_url="{self._base_url}">'

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            API_KEY_HEADER: self._api_key,
        }

    async def forward_to_odoo(
        self, request: OdooProxyRequest | Mapping[str, Any]
    ) -> JsonRpcResponse[Any]:
        """Forward a request to an Odoo instance through the proxy.

        The returned envelope may carry either ``result`` or ``error`` as
        reported by the proxy or Odoo; errors inside a valid envelope are
        returned, not raised.

        Args:
            request: The request payload, as a model or a mapping with the
                same wire keys. It is sent as-is.

        Returns:
            The parsed JSON-RPC 2.0 envelope, unchanged.

        Raises:
            OdooProxyApiHttpError: The network call failed, or the proxy
                answered with a status outside its documented set.
            OdooProxyApiFormatError: The body was empty, not JSON, or not a
                JSON-RPC 2.0 envelope.
        """
        url = f"{self._base_url}{ODOO_PROXY_PATH}"
        body = _serialize_request(request)
        log = logger.bind(request_id=_request_field(request, "id"), url=url)
        log.debug(
            "Forwarding request to Odoo proxy",
            action=_request_field(request, "action"),
            model_id=_request_field(request, "model_id"),
        )

        try:
            response = await self._transport(
                "POST", url, headers=self._build_headers(), content=body
            )
        except Exception as e:
            log.warning("Network error calling Odoo proxy", error=str(e))
            raise OdooProxyApiHttpError(
                f"Network error calling Odoo Proxy API: {str(e) or 'Unknown network error'}"
            ) from e

        if response.status_code not in EXPECTED_PROXY_STATUS_CODES:
            detail = f"Status: {response.status_code} {response.reason_phrase}"
            preview = await _read_body_preview(response)
            if preview:
                detail += f"\nResponse Body: {preview}"
            log.warning(
                "Unexpected HTTP status from Odoo proxy",
                status_code=response.status_code,
            )
            raise OdooProxyApiHttpError(
                f"Unexpected HTTP response from Odoo Proxy API. {detail}",
                response=response,
            )

        try:
            text = await _read_text(response)
        except Exception as e:
            raise OdooProxyApiFormatError(
                f"Failed to read response body from Odoo Proxy API: {e}"
            ) from e

        if not text:
            raise OdooProxyApiFormatError("Received empty response body from Odoo Proxy API.")

        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise OdooProxyApiFormatError(
                f"Failed to parse JSON response from Odoo Proxy API: {e}"
            ) from e

        if (
            not isinstance(data, dict)
            or data.get("jsonrpc") != JSONRPC_VERSION
            # id may be null but the key must exist
            or "id" not in data
        ):
            log.warning(
                "Invalid JSON-RPC envelope from Odoo proxy",
                status_code=response.status_code,
            )
            raise OdooProxyApiFormatError(
                "Invalid JSON-RPC 2.0 response format received from Odoo Proxy API."
            )

        log.debug(
            "Received JSON-RPC envelope",
            status_code=response.status_code,
            has_error=data.get("error") is not None,
        )
        return cast(JsonRpcResponse[Any], data)


def create_odoo_proxy_client(
    config: OdooApiClientConfig | None = None,
) -> OdooProxyApiClient:
    """Create and configure an :class:`OdooProxyApiClient`.

    Args:
        config: Connection settings. When omitted they are read from the
            ``ODX_PROXY_*`` environment variables.

    Returns:
        A new client instance.
    """
    if config is None:
        config = OdooApiClientConfig.from_env()
    return OdooProxyApiClient(config)


def _serialize_request(request: OdooProxyRequest | Mapping[str, Any]) -> bytes:
    if isinstance(request, OdooProxyRequest):
        payload: Any = request.to_wire()
    else:
        payload = dict(request)
    return json.dumps(_to_json_value(payload), allow_nan=False).encode("utf-8")


def _to_json_value(value: Any) -> Any:
    """Prepare a payload for strict JSON; non-finite floats become null."""
    if isinstance(value, BaseModel):
        return _to_json_value(value.model_dump(mode="json", exclude_unset=True))
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {k: _to_json_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_to_json_value(v) for v in value]
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _request_field(request: OdooProxyRequest | Mapping[str, Any], name: str) -> Any:
    if isinstance(request, OdooProxyRequest):
        value = getattr(request, name)
    else:
        value = request.get(name)
    return getattr(value, "value", value)


async def _read_text(response: httpx.Response) -> str:
    await response.aread()
    return response.text


async def _read_body_preview(response: httpx.Response) -> str:
    """Best-effort body excerpt for diagnostics; read failures yield ''."""
    try:
        text = await _read_text(response)
    except Exception as e:
        logger.debug("Could not read error response body", error=str(e))
        return ""
    if len(text) > ERROR_BODY_PREVIEW_CHARS:
        return f"{text[:ERROR_BODY_PREVIEW_CHARS]}..."
    return text
