import json
from logging import getLogger
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel

from ._config import Config
from ._events import EventEmitter
from ._transport import HttpxTransport, Transport
from ._utils import (
    Request,
    RequestOptions,
    Response,
    decode_payload,
    encode_query,
    join_url,
    normalize_path,
    setup_logging,
    split_method,
)
from ._utils.constants import (
    CONNECTION_ERROR,
    CONTENT_TYPE_JSON,
    EVENT_REQUEST,
    EVENT_RESPONSE,
    EVENT_STATUS,
    HEADER_CONTENT_TYPE,
    LOGGER_NAME,
    OUTCOME_ERROR,
    OUTCOME_SUCCESS,
)
from .models.errors import InvalidArgumentError, SerializationError

Callback = Callable[[Optional[str], Any, Response], Any]
Serializer = Callable[[Any, Request], Any]

_UNSET: Any = object()


def _is_record(value: Any) -> bool:
    return value is not None and not isinstance(value, (str, bytes, int, float))


def _record_id(record: Any, id_key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(id_key)
    return getattr(record, id_key, None)


def _member(method: str, id: Any) -> str:
    return f"{method} /{'' if id is None else id}"


def _required_id(method: str, id: Any) -> str:
    if id is None:
        raise InvalidArgumentError(f"{method} requires an id, got None")
    return _member(method, id)


def _jsonable(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    return body


class Resource(EventEmitter):
    """Represents a single resource type exposed by a RESTful API.

    Every verb builds one :class:`Request`, emits ``req`` and
    ``req:<relative url>``, hands the request to the transport and, once the
    transport reports back, emits in order::

        status, status:<code>, res, res:<relative url>,
        <outcome>, <outcome>:<relative url>

    where ``<outcome>`` is ``success`` or ``error``. Each of these carries
    ``(request, response)``. The caller's callback then receives
    ``(error, data, response)``.

    Class attributes act as defaults for subclasses; instances always work
    on their own copies of ``query`` and ``headers``.

    Examples:
        ```python
        from resourceful import resource

        users = resource("https://example.com/api/users")
        users.header("Authorization", "Bearer abc")
        users.get(42, lambda err, user, res: print(err or user))
        ```
    """

    url: str = "/"
    query: dict[str, Any] = {}
    headers: dict[str, str] = {}
    id_key: str = "id"
    error_message_prop: Optional[str] = None

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        config: Optional[Config] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        super().__init__()
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config(base_url=type(self).url)
        self._transport = transport

        explicit = config.model_fields_set if config is not None else set()
        self.url = url or (
            config.base_url if config and "base_url" in explicit else type(self).url
        )
        self.query = dict(type(self).query)
        self.headers = {k.lower(): v for k, v in type(self).headers.items()}

        if config is not None:
            # Only fields set on the config override class-level defaults.
            if "id_key" in explicit:
                self.id_key = config.id_key
            if "error_message_prop" in explicit:
                self.error_message_prop = config.error_message_prop
            setup_logging(config.debug)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} url={self.url!r}>"

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport(
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
            )
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        self._transport = transport

    def param(self, key: Union[str, Mapping[str, Any]], value: Any = _UNSET) -> Any:
        """Get or set query parameters sent with each request.

        ``param(key)`` returns the current value or ``None``. ``param(key,
        value)`` stores it, unless ``value`` is ``False`` or ``None``, which
        removes the key. ``param(mapping)`` applies every item that way.
        Setters return the resource.
        """
        return self._configure(self.query, key, value, lambda k: k)

    def header(self, name: Union[str, Mapping[str, Any]], value: Any = _UNSET) -> Any:
        """Get or set headers sent with each request.

        Same contract as :meth:`param`; names are case-insensitive.
        """
        return self._configure(self.headers, name, value, str.lower)

    def _configure(
        self,
        store: dict[str, Any],
        key: Union[str, Mapping[str, Any]],
        value: Any,
        normalize: Callable[[str], str],
    ) -> Any:
        if isinstance(key, Mapping):
            for k, v in key.items():
                self._configure(store, k, v, normalize)
            return self

        if not isinstance(key, str):
            raise InvalidArgumentError(
                f"Expected a string or a mapping, got {type(key).__name__}"
            )

        key = normalize(key)
        if value is _UNSET:
            return store.get(key)

        if value is False or value is None:
            store.pop(key, None)
        else:
            store[key] = value
        return self

    def index(
        self, callback: Optional[Callback] = None, options: Optional[RequestOptions] = None
    ) -> "Resource":
        return self._call("GET /", None, callback, options)

    def get(
        self,
        id: Any,
        callback: Optional[Callback] = None,
        options: Optional[RequestOptions] = None,
    ) -> "Resource":
        return self._call(_required_id("GET", id), None, callback, options)

    def post(
        self,
        body: Any,
        callback: Optional[Callback] = None,
        options: Optional[RequestOptions] = None,
    ) -> "Resource":
        return self._call("POST /", body, callback, options)

    def put(
        self,
        id: Any,
        body: Any = None,
        callback: Any = None,
        options: Any = None,
    ) -> "Resource":
        """Issue a PUT to ``/<id>``.

        ``put(record, callback[, options])`` is accepted as well: when the
        first argument is a record (mapping or object) and the second is
        callable, the record is the body and its ``id_key`` field the id.
        """
        id, body, callback, options = self._identify(id, body, callback, options)
        return self._call(_member("PUT", id), body, callback, options)

    def patch(
        self,
        id: Any,
        body: Any = None,
        callback: Any = None,
        options: Any = None,
    ) -> "Resource":
        id, body, callback, options = self._identify(id, body, callback, options)
        return self.put(id, body, callback, {**(options or {}), "method": "PATCH"})

    def delete(
        self,
        id: Any,
        callback: Optional[Callback] = None,
        options: Optional[RequestOptions] = None,
    ) -> "Resource":
        return self._call(_required_id("DELETE", id), None, callback, options)

    create = post
    read = get
    update = put
    remove = delete

    def _identify(
        self, id: Any, body: Any, callback: Any, options: Any
    ) -> tuple[Any, Any, Optional[Callback], Optional[RequestOptions]]:
        if _is_record(id) and callable(body):
            return _record_id(id, self.id_key), id, body, callback
        return id, body, callback, options

    def serialize_body(self, body: Any, request: Request) -> Any:
        """Encode ``body`` as JSON, defaulting the content type.

        Assign another callable taking ``(body, request)`` to replace it, or
        ``None`` to send bodies untouched.
        """
        if HEADER_CONTENT_TYPE not in request.headers:
            request.headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
        return json.dumps(_jsonable(body))

    def _call(
        self,
        verb_path: str,
        body: Any,
        callback: Optional[Callback],
        options: Optional[RequestOptions] = None,
    ) -> "Resource":
        options = options or {}
        if callback is not None and not callable(callback):
            raise InvalidArgumentError("callback must be callable")

        method, path = split_method(verb_path)
        method = (options.get("method") or method).upper()
        path = normalize_path(path)

        query = {**self.query, **(options.get("query") or {})}
        headers = dict(self.headers)
        for name, value in (options.get("headers") or {}).items():
            headers[name.lower()] = value

        relative_url = path + encode_query(query)
        url = join_url(self.url, relative_url)

        request = Request(
            method=method,
            path=path,
            url=url,
            full_url=url,
            relative_url=relative_url,
            query=query,
            headers=headers,
            body=body,
            raw_body=body,
            response_type=options.get("response_type"),
        )

        serializer: Optional[Serializer] = self.serialize_body
        serialize = options.get("serialize") is not False
        if body is not None and serializer is not None and serialize:
            try:
                serialized = serializer(body, request)
            except Exception as e:
                raise SerializationError(method, path, str(e)) from e
            if serialized is not None:
                request.body_serialized = request.body = serialized

        self.emit(EVENT_REQUEST, request)
        self.emit(f"{EVENT_REQUEST}:{relative_url}", request)

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {request.headers}")

        completed = False

        def complete(error: Optional[BaseException], response: Optional[Response]) -> None:
            nonlocal completed
            if completed:
                self._logger.warning(
                    f"Ignoring repeated completion for {request.method} {request.url}"
                )
                return
            completed = True
            self._complete(request, callback, error, response)

        self.transport(request, complete)
        return self

    def _complete(
        self,
        request: Request,
        callback: Optional[Callback],
        error: Any,
        response: Optional[Response],
    ) -> None:
        response = response or Response()
        if isinstance(error, BaseException):
            response.exception = error

        decode_payload(response)
        if not response.status:
            response.status = None
            response.error = CONNECTION_ERROR
            self._logger.warning(f"{request.method} {request.url}: {CONNECTION_ERROR}")
        elif error is not None:
            response.error = str(error)
        elif response.status >= 400:
            response.error = self._error_message(response)
        else:
            response.error = None

        outcome = OUTCOME_ERROR if response.error is not None else OUTCOME_SUCCESS
        self._logger.debug(f"Response: {response.status} {outcome}")

        relative_url = request.relative_url
        for event in (
            EVENT_STATUS,
            f"{EVENT_STATUS}:{response.status or 0}",
            EVENT_RESPONSE,
            f"{EVENT_RESPONSE}:{relative_url}",
            outcome,
            f"{outcome}:{relative_url}",
        ):
            self.emit(event, request, response)

        if callback is not None:
            callback(response.error, response.data, response)

    def _error_message(self, response: Response) -> str:
        prop = self.error_message_prop
        if prop and isinstance(response.data, Mapping) and response.data.get(prop):
            return str(response.data[prop])
        return response.reason or f"HTTP {response.status}"


def resource(url: Optional[str] = None, **kwargs: Any) -> Resource:
    """Create a :class:`Resource` for the collection at ``url``."""
    return Resource(url, **kwargs)
