"""Constants for HTTP statuses returned by the Odoo proxy endpoint.

The proxy documents a JSON-RPC envelope body for every status in
``EXPECTED_PROXY_STATUS_CODES``; anything else is out of contract.
"""

HTTP_200_OK = 200
HTTP_400_BAD_REQUEST = 400
HTTP_401_UNAUTHORIZED = 401
HTTP_500_INTERNAL_SERVER_ERROR = 500
HTTP_502_BAD_GATEWAY = 502
HTTP_504_GATEWAY_TIMEOUT = 504

EXPECTED_PROXY_STATUS_CODES: frozenset[int] = frozenset(
    {
        HTTP_200_OK,
        HTTP_400_BAD_REQUEST,
        HTTP_401_UNAUTHORIZED,
        HTTP_500_INTERNAL_SERVER_ERROR,
        HTTP_502_BAD_GATEWAY,
        HTTP_504_GATEWAY_TIMEOUT,
    }
)

# Body excerpt length attached to unexpected-status errors
ERROR_BODY_PREVIEW_CHARS = 200
