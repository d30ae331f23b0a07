import os
import ssl
from typing import Any, Optional

_CA_FILE_VARIABLES = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")


def _env_path(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """SSL context for outgoing requests.

    Uses the operating system trust store through ``truststore``. Without it,
    a CA file named by ``SSL_CERT_FILE`` or ``REQUESTS_CA_BUNDLE`` is used,
    then the ``certifi`` bundle; ``SSL_CERT_DIR`` adds a CA directory.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = next(
            (path for path in map(_env_path, _CA_FILE_VARIABLES) if path),
            certifi.where(),
        )
        return ssl.create_default_context(cafile=cafile, capath=_env_path("SSL_CERT_DIR"))


def get_httpx_client_kwargs(
    timeout: float = 30.0, follow_redirects: bool = True
) -> dict[str, Any]:
    """Keyword arguments shared by every httpx client the transports create."""
    return {
        "verify": create_ssl_context(),
        "timeout": timeout,
        "follow_redirects": follow_redirects,
    }
