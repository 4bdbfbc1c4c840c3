from strings_panel.clients.http_client import HTTPClientPool, close_http_clients

__all__ = ["HTTPClientPool", "close_http_clients"]
