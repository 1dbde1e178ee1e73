from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

from odxproxy.connectors.odoo_proxy import OdooProxyApiClient, create_odoo_proxy_client
from odxproxy.core.config.client_config import OdooApiClientConfig
from odxproxy.core.domain.odoo_proxy import (
    OdooAction,
    OdooInstanceConfig,
    OdooProxyRequest,
)
from tests.helpers import (
    TEST_BASE_URL,
    TEST_ODOO_API_KEY,
    TEST_PROXY_API_KEY,
    RecordingTransport,
)


@pytest.fixture
def odoo_instance() -> OdooInstanceConfig:
    return OdooInstanceConfig(
        url="https://odoo.example.invalid",
        db="prod",
        user_id=2,
        api_key=TEST_ODOO_API_KEY,
    )


@pytest.fixture
def sample_request(odoo_instance: OdooInstanceConfig) -> OdooProxyRequest:
    return OdooProxyRequest(
        id="req-1",
        action=OdooAction.SEARCH_READ,
        model_id="res.partner",
        params=[[["is_company", "=", True]]],
        keyword={"fields": ["name"], "limit": 5},
        odoo_instance=odoo_instance,
    )


@pytest.fixture
def make_client() -> Callable[[RecordingTransport], OdooProxyApiClient]:
    def _make(transport: RecordingTransport) -> OdooProxyApiClient:
        return create_odoo_proxy_client(
            OdooApiClientConfig(
                base_url=TEST_BASE_URL,
                api_key=TEST_PROXY_API_KEY,
                transport=transport,
            )
        )

    return _make


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    filters = list(root.filters)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.filters[:] = filters
    root.setLevel(level)
