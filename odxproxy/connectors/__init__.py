from .odoo_proxy import OdooProxyApiClient, create_odoo_proxy_client

__all__ = ["OdooProxyApiClient", "create_odoo_proxy_client"]
