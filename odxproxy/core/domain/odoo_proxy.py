"""Wire models for the Odoo proxy API.

Requests are pydantic models so callers get validation when they build
them. Responses are typed dictionaries: the client hands back the parsed
envelope untouched, and only its outer shape is ever checked.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from pydantic import ConfigDict
from typing_extensions import NotRequired, TypedDict

from odxproxy.core.interfaces.model_bases import DomainModel

TResult = TypeVar("TResult")


class OdooAction(str, Enum):
    """Odoo model methods the proxy is allowed to run."""

    SEARCH_COUNT = "search_count"
    SEARCH = "search"
    READ = "read"
    FIELDS_GET = "fields_get"
    SEARCH_READ = "search_read"
    CREATE = "create"
    WRITE = "write"
    UNLINK = "unlink"
    CALL_METHOD = "call_method"


class OdooInstanceConfig(DomainModel):
    """Target Odoo instance the proxy forwards to."""

    model_config = ConfigDict(frozen=True)

    url: str
    user_id: int
    db: str
    api_key: str

    def __repr__(self) -> str:
        return f'<OdooInstanceConfig url="{self.url}" db="{self.db}">'


class OdooProxyRequest(DomainModel):
    """Request body sent to ``POST /api/odoo``.

    ``keyword`` and ``params`` are handed to Odoo's ``execute_kw`` as
    keyword and positional arguments. ``fn_name`` is only read by the proxy
    when ``action`` is ``call_method``.
    """

    # allow the `model_id` wire field
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    id: str
    action: OdooAction
    model_id: str
    keyword: dict[str, Any] | None = None
    params: list[Any] | None = None
    fn_name: str | None = None
    odoo_instance: OdooInstanceConfig

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready body; fields never set are left out."""
        return self.model_dump(mode="json", exclude_unset=True)


class JsonRpcError(TypedDict):
    code: int
    message: str
    data: NotRequired[Any]


class JsonRpcResponse(TypedDict, Generic[TResult]):
    """JSON-RPC 2.0 response envelope returned by the proxy.

    ``result`` and ``error`` are both optional and may even appear together;
    the proxy contract does not promise exclusivity.
    """

    jsonrpc: Literal["2.0"]
    id: str | None
    result: NotRequired[TResult | None]
    error: NotRequired[JsonRpcError | None]
