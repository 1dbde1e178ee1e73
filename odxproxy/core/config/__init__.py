from odxproxy.core.config.client_config import (
    ENV_API_KEY,
    ENV_BASE_URL,
    ENV_TIMEOUT,
    OdooApiClientConfig,
)

__all__ = ["ENV_API_KEY", "ENV_BASE_URL", "ENV_TIMEOUT", "OdooApiClientConfig"]
