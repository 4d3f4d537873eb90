from .admina_client import AdminaClient, close_client, get_client, reset_client, set_client

__all__ = ["AdminaClient", "close_client", "get_client", "reset_client", "set_client"]
