from typing import Any, Callable, Optional

import httpx

from resourceful import Request, Response


class FakeTransport:
    """Records every request and answers with queued replies.

    A reply with ``status=None`` simulates a connection failure.
    """

    def __init__(self) -> None:
        self.requests: list[Request] = []
        self._replies: list[dict[str, Any]] = []

    def reply(
        self,
        status: Optional[int] = 200,
        body: str = "",
        headers: Optional[dict[str, str]] = None,
        reason: Optional[str] = None,
    ) -> "FakeTransport":
        self._replies.append(
            {"status": status, "body": body, "headers": headers or {}, "reason": reason}
        )
        return self

    def __call__(
        self,
        request: Request,
        callback: Callable[[Optional[BaseException], Optional[Response]], None],
    ) -> None:
        self.requests.append(request)
        reply = self._replies.pop(0) if self._replies else {
            "status": 200,
            "body": "",
            "headers": {},
            "reason": None,
        }

        if reply["status"] is None:
            callback(httpx.ConnectError("connection refused"), None)
            return

        callback(
            None,
            Response(
                status=reply["status"],
                reason=reply["reason"] or httpx.codes.get_reason_phrase(reply["status"]),
                headers=reply["headers"],
                body=reply["body"],
            ),
        )

    @property
    def last(self) -> Request:
        return self.requests[-1]
