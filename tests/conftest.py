from typing import Any, Callable

import pytest

from resourceful import Resource
from tests.utils.fake_transport import FakeTransport


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "RESOURCEFUL_URL",
        "RESOURCEFUL_TIMEOUT",
        "RESOURCEFUL_DEBUG",
        "RESOURCEFUL_ID_KEY",
        "RESOURCEFUL_ERROR_MESSAGE_PROP",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def api(transport: FakeTransport) -> Resource:
    return Resource("/api/users", transport=transport)


@pytest.fixture
def calls() -> list[tuple[Any, Any, Any]]:
    return []


@pytest.fixture
def callback(calls: list[tuple[Any, Any, Any]]) -> Callable[[Any, Any, Any], None]:
    def record(error: Any, data: Any, response: Any) -> None:
        calls.append((error, data, response))

    return record
