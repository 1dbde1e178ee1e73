from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, Field

from odxproxy.core.common.exceptions import ConfigurationError
from odxproxy.core.common.logging_utils import redact
from odxproxy.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

ENV_BASE_URL = "ODX_PROXY_BASE_URL"
ENV_API_KEY = "ODX_PROXY_API_KEY"
ENV_TIMEOUT = "ODX_PROXY_TIMEOUT"


def _env_to_float(
    name: str, default: float | None, env: Mapping[str, str]
) -> float | None:
    """Return an environment variable parsed as a float."""
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationError(
            message=f"{name} must be a number, got {value!r}",
            details={"variable": name},
        ) from e


class OdooApiClientConfig(DomainModel):
    """Settings needed to build an ``OdooProxyApiClient``.

    The values are checked when the client is constructed, not here, so a
    config can be assembled piecemeal (for example from the environment)
    and rejected in one place.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: str = Field(
        default="", description='Proxy root URL, e.g. "http://0.0.0.0:3000"'
    )
    api_key: str = Field(default="", repr=False)
    # Async callable matching ITransport; None selects the httpx default
    transport: Any = Field(default=None, repr=False)
    # Only used when the default transport is built
    timeout: float | None = None

    def __repr__(self) -> str:
        return (
            f'<OdooApiClientConfig base_url="{self.base_url}" '
            f'api_key="{redact(self.api_key)}">'
        )

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, **overrides: Any
    ) -> OdooApiClientConfig:
        """Build a config from ``ODX_PROXY_*`` environment variables.

        Keyword overrides win over the environment.
        """
        if env is None:
            env = os.environ

        values: dict[str, Any] = {
            "base_url": env.get(ENV_BASE_URL, ""),
            "api_key": env.get(ENV_API_KEY, ""),
            "timeout": _env_to_float(ENV_TIMEOUT, None, env),
        }
        values.update(overrides)

        if not values["base_url"]:
            logger.debug("%s is not set", ENV_BASE_URL)
        return cls(**values)
