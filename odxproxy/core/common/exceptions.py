"""
Common exception classes for the ODX proxy client.

Two failure kinds reach callers of the client: transport failures
(``OdooProxyApiHttpError``) and envelope format failures
(``OdooProxyApiFormatError``). Errors reported by Odoo itself are not
exceptions; they travel back inside the JSON-RPC envelope.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class OdxProxyError(Exception):
    """Base exception class for all ODX proxy client errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }
        return {"error": error_dict}


class ConfigurationError(OdxProxyError):
    """Raised when the client cannot be built from its configuration."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
    ):
        super().__init__(message, details)


class OdooProxyApiHttpError(OdxProxyError):
    """Raised for network failures and out-of-contract HTTP responses.

    ``response`` is ``None`` when the transport failed before any HTTP
    response was produced.
    """

    def __init__(
        self,
        message: str = "HTTP error calling Odoo Proxy API",
        response: httpx.Response | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.response = response
        self.status: int | None = response.status_code if response is not None else None
        self.status_text: str | None = (
            response.reason_phrase if response is not None else None
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["error"]["status"] = self.status
        data["error"]["status_text"] = self.status_text
        return data


class OdooProxyApiFormatError(OdxProxyError):
    """Raised when a response body is not a valid JSON-RPC 2.0 envelope."""

    def __init__(
        self,
        message: str = "Invalid response format from Odoo Proxy API",
        details: dict | None = None,
    ):
        super().__init__(message, details)
