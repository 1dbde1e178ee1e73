from odxproxy.core.transport.httpx_transport import (
    DEFAULT_TIMEOUT_SECONDS,
    HttpxTransport,
    resolve_default_transport,
)

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "HttpxTransport", "resolve_default_transport"]
