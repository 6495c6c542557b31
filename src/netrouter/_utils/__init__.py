from ._ssl_context import create_ssl_context, get_httpx_client_kwargs
from ._stringify import stringify_value

__all__ = [
    "create_ssl_context",
    "get_httpx_client_kwargs",
    "stringify_value",
]
