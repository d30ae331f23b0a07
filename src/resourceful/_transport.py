import asyncio
from logging import getLogger
from typing import Any, Callable, Mapping, Optional, Protocol

import httpx

from ._utils import Request, Response, get_httpx_client_kwargs, user_agent_value
from ._utils.constants import BINARY_RESPONSE_TYPES, HEADER_USER_AGENT, LOGGER_NAME

Completion = Callable[[Optional[BaseException], Optional[Response]], None]


class Transport(Protocol):
    """Anything able to perform a built request and report back once."""

    def __call__(self, request: Request, callback: Completion) -> Any: ...


def _request_kwargs(request: Request) -> dict[str, Any]:
    headers = {HEADER_USER_AGENT: user_agent_value(), **request.headers}
    kwargs: dict[str, Any] = {"headers": headers}

    body = request.body
    if body is None:
        return kwargs
    if isinstance(body, (str, bytes)):
        kwargs["content"] = body
    elif isinstance(body, Mapping):
        kwargs["data"] = dict(body)
    else:
        kwargs["content"] = str(body)
    return kwargs


def to_response(response: httpx.Response, response_type: Optional[str] = None) -> Response:
    binary = response_type in BINARY_RESPONSE_TYPES
    return Response(
        status=response.status_code,
        reason=response.reason_phrase or None,
        headers={k.lower(): v for k, v in response.headers.items()},
        body=response.content if binary else response.text,
    )


class HttpxTransport:
    """Blocking transport over :class:`httpx.Client`.

    The completion callback runs before ``__call__`` returns. A request whose
    ``response_type`` is ``arraybuffer``, ``blob`` or ``bytes`` gets the raw
    body bytes instead of decoded text.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        base_url: str = "",
        timeout: float = 30.0,
        follow_redirects: bool = True,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._client = client or httpx.Client(
            base_url=base_url,
            **get_httpx_client_kwargs(timeout, follow_redirects),
        )

    def __call__(self, request: Request, callback: Completion) -> None:
        try:
            response = self._client.request(
                request.method, request.url, **_request_kwargs(request)
            )
        except httpx.HTTPError as e:
            self._logger.warning(f"{request.method} {request.url} failed: {e}")
            callback(e, None)
            return

        callback(None, to_response(response, request.response_type))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncHttpxTransport:
    """Transport over :class:`httpx.AsyncClient`.

    Each call is scheduled as a task on the running event loop, so it must
    be made from inside a coroutine. ``drain()`` waits for every call that
    is still in flight.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        base_url: str = "",
        timeout: float = 30.0,
        follow_redirects: bool = True,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            **get_httpx_client_kwargs(timeout, follow_redirects),
        )
        self._pending: set[asyncio.Task[None]] = set()

    def __call__(self, request: Request, callback: Completion) -> "asyncio.Task[None]":
        task = asyncio.get_running_loop().create_task(self._send(request, callback))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _send(self, request: Request, callback: Completion) -> None:
        try:
            response = await self._client.request(
                request.method, request.url, **_request_kwargs(request)
            )
        except httpx.HTTPError as e:
            self._logger.warning(f"{request.method} {request.url} failed: {e}")
            callback(e, None)
            return

        callback(None, to_response(response, request.response_type))

    async def drain(self) -> None:
        while self._pending:
            await asyncio.gather(*self._pending)

    async def aclose(self) -> None:
        await self.drain()
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
