"""Constants shared across the ODX proxy client."""

from odxproxy.core.constants.http_status_constants import (
    ERROR_BODY_PREVIEW_CHARS,
    EXPECTED_PROXY_STATUS_CODES,
)

ODOO_PROXY_PATH = "/api/odoo"
API_KEY_HEADER = "apikey"
JSONRPC_VERSION = "2.0"

__all__ = [
    "API_KEY_HEADER",
    "ERROR_BODY_PREVIEW_CHARS",
    "EXPECTED_PROXY_STATUS_CODES",
    "JSONRPC_VERSION",
    "ODOO_PROXY_PATH",
]
