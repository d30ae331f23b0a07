from typing import Any, Callable, Optional, TypeVar, overload

from .models.errors import InvalidArgumentError

Handler = Callable[..., Any]
HandlerT = TypeVar("HandlerT", bound=Handler)


class EventEmitter:
    """Minimal publish/subscribe bus owned by a single resource.

    Event types are matched as exact strings. Handlers run in registration
    order; ``emit`` iterates over a snapshot so handlers may add or remove
    listeners while an event is being dispatched.
    """

    def __init__(self) -> None:
        self._events: dict[str, list[Handler]] = {}

    @overload
    def on(self, type: str) -> Callable[[HandlerT], HandlerT]: ...

    @overload
    def on(self, type: str, handler: HandlerT) -> HandlerT: ...

    def on(self, type: str, handler: Optional[Handler] = None) -> Any:
        """Register ``handler`` for ``type``.

        Without a handler, returns a decorator::

            @api.on("res")
            def log_response(req, res): ...
        """
        if handler is None:

            def decorator(fn: HandlerT) -> HandlerT:
                return self.on(type, fn)

            return decorator

        if not callable(handler):
            raise InvalidArgumentError(f"Handler for '{type}' is not callable")

        self._events.setdefault(type, []).append(handler)
        return handler

    def remove_listener(self, type: str, handler: Handler) -> bool:
        """Remove one registration of ``handler`` for ``type``.

        Only the earliest matching registration is removed. Returns whether
        anything was removed.
        """
        handlers = self._events.get(type)
        if not handlers:
            return False

        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                break
        else:
            return False

        if not handlers:
            del self._events[type]
        return True

    off = remove_listener

    def emit(self, type: str, *args: Any) -> bool:
        handlers = self._events.get(type)
        if not handlers:
            return False

        for handler in list(handlers):
            handler(*args)
        return True

    def listeners(self, type: str) -> list[Handler]:
        return list(self._events.get(type, ()))
