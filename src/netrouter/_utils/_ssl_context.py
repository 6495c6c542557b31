import os
import ssl
from typing import Any, Optional

from .constants import DEFAULT_TIMEOUT

_CA_FILE_VARS = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """Build the SSL context used to verify servers.

    The system trust store is used when ``truststore`` is installed. Otherwise
    the CA bundle comes from ``SSL_CERT_FILE`` or ``REQUESTS_CA_BUNDLE``,
    falling back to certifi, with ``SSL_CERT_DIR`` as an extra directory.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = next(
            (path for path in map(_env_path, _CA_FILE_VARS) if path), certifi.where()
        )
        return ssl.create_default_context(
            cafile=cafile, capath=_env_path("SSL_CERT_DIR")
        )


def get_httpx_client_kwargs(
    timeout: Optional[float] = DEFAULT_TIMEOUT,
    verify_ssl: bool = True,
    follow_redirects: bool = True,
) -> dict[str, Any]:
    """Build the keyword arguments shared by the sync and async httpx clients.

    Args:
        timeout: Request timeout in seconds, ``None`` disables it.
        verify_ssl: Verify server certificates. When disabled no SSL context is built.
        follow_redirects: Follow 3xx responses transparently.

    Returns:
        dict: Keyword arguments for ``httpx.Client`` / ``httpx.AsyncClient``.
    """
    return {
        "verify": create_ssl_context() if verify_ssl else False,
        "timeout": timeout,
        "follow_redirects": follow_redirects,
    }
