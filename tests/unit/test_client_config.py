from __future__ import annotations

import pydantic
import pytest

from odxproxy.core.common.exceptions import ConfigurationError
from odxproxy.core.config.client_config import OdooApiClientConfig


def test_from_env_reads_proxy_variables() -> None:
    env = {
        "ODX_PROXY_BASE_URL": "http://proxy:3000/",
        "ODX_PROXY_API_KEY": "env-key",
        "ODX_PROXY_TIMEOUT": "12.5",
    }

    config = OdooApiClientConfig.from_env(env)

    assert config.base_url == "http://proxy:3000/"
    assert config.api_key == "env-key"
    assert config.timeout == 12.5
    assert config.transport is None


def test_from_env_defaults_when_unset() -> None:
    config = OdooApiClientConfig.from_env({})

    assert config.base_url == ""
    assert config.api_key == ""
    assert config.timeout is None


def test_from_env_overrides_take_precedence() -> None:
    env = {"ODX_PROXY_BASE_URL": "http://env", "ODX_PROXY_API_KEY": "env-key"}

    config = OdooApiClientConfig.from_env(env, api_key="override-key", timeout=3)

    assert config.base_url == "http://env"
    assert config.api_key == "override-key"
    assert config.timeout == 3.0


def test_from_env_rejects_non_numeric_timeout() -> None:
    with pytest.raises(ConfigurationError, match="ODX_PROXY_TIMEOUT must be a number"):
        OdooApiClientConfig.from_env({"ODX_PROXY_TIMEOUT": "soon"})


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ODX_PROXY_BASE_URL", "http://from-os")
    monkeypatch.setenv("ODX_PROXY_API_KEY", "os-key")
    monkeypatch.setenv("ODX_PROXY_TIMEOUT", " ")

    config = OdooApiClientConfig.from_env()

    assert config.base_url == "http://from-os"
    assert config.timeout is None


def test_config_is_frozen() -> None:
    config = OdooApiClientConfig(base_url="http://h", api_key="k")

    with pytest.raises(pydantic.ValidationError):
        config.api_key = "other"  # type: ignore[misc]


def test_repr_hides_api_key() -> None:
    config = OdooApiClientConfig(base_url="http://h", api_key="very-secret-key")

    assert "very-secret-key" not in repr(config)
    assert repr(config) == '<OdooApiClientConfig base_url="http://h" api_key="ve***ey">'
