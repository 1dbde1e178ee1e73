"""Typed async client for the ODX proxy in front of Odoo."""

from odxproxy.connectors.odoo_proxy import OdooProxyApiClient, create_odoo_proxy_client
from odxproxy.core.common.exceptions import (
    ConfigurationError,
    OdooProxyApiFormatError,
    OdooProxyApiHttpError,
    OdxProxyError,
)
from odxproxy.core.config.client_config import OdooApiClientConfig
from odxproxy.core.domain.odoo_proxy import (
    JsonRpcError,
    JsonRpcResponse,
    OdooAction,
    OdooInstanceConfig,
    OdooProxyRequest,
)
from odxproxy.core.transport.httpx_transport import HttpxTransport

__all__ = [
    "ConfigurationError",
    "HttpxTransport",
    "JsonRpcError",
    "JsonRpcResponse",
    "OdooAction",
    "OdooApiClientConfig",
    "OdooInstanceConfig",
    "OdooProxyApiClient",
    "OdooProxyApiFormatError",
    "OdooProxyApiHttpError",
    "OdooProxyRequest",
    "OdxProxyError",
    "create_odoo_proxy_client",
]
