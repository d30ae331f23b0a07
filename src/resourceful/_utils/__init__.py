from importlib.metadata import PackageNotFoundError, version

from ._logs import setup_logging
from ._request_spec import Request, RequestOptions
from ._response import Response, decode_payload
from ._ssl_context import get_httpx_client_kwargs
from ._url import (
    encode_query,
    join_url,
    normalize_base_url,
    normalize_path,
    split_method,
)

try:
    __version__ = version("resourceful")
except PackageNotFoundError:
    __version__ = "0.0.0"


def user_agent_value() -> str:
    return f"resourceful/{__version__}"


__all__ = [
    "Request",
    "RequestOptions",
    "Response",
    "__version__",
    "decode_payload",
    "encode_query",
    "get_httpx_client_kwargs",
    "join_url",
    "normalize_base_url",
    "normalize_path",
    "setup_logging",
    "split_method",
    "user_agent_value",
]
