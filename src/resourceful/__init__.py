"""Client-side abstraction over RESTful HTTP resources.

A :class:`Resource` turns verb calls (``index``, ``get``, ``post``, ``put``,
``patch``, ``delete``) into fully built requests, hands them to a transport
and reports each lifecycle step as events on its own event bus.
"""

from ._config import Config
from ._events import EventEmitter
from ._resource import Resource, resource
from ._transport import AsyncHttpxTransport, HttpxTransport, Transport
from ._utils import Request, RequestOptions, Response, __version__, setup_logging
from .models.errors import InvalidArgumentError, ResourceError, SerializationError

__all__ = [
    "AsyncHttpxTransport",
    "Config",
    "EventEmitter",
    "HttpxTransport",
    "InvalidArgumentError",
    "Request",
    "RequestOptions",
    "Resource",
    "ResourceError",
    "Response",
    "SerializationError",
    "Transport",
    "__version__",
    "resource",
    "setup_logging",
]
