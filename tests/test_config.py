import logging

import pytest
from pydantic import ValidationError

from resourceful import Config, setup_logging


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()

        assert config.base_url == "/"
        assert config.timeout == 30.0
        assert config.debug is False
        assert config.id_key == "id"
        assert config.error_message_prop is None

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESOURCEFUL_URL", "https://example.com/api/users")
        monkeypatch.setenv("RESOURCEFUL_TIMEOUT", "5")
        monkeypatch.setenv("RESOURCEFUL_DEBUG", "true")
        monkeypatch.setenv("RESOURCEFUL_ID_KEY", "uid")
        monkeypatch.setenv("RESOURCEFUL_ERROR_MESSAGE_PROP", "message")

        config = Config.from_env()

        assert config.base_url == "https://example.com/api/users"
        assert config.timeout == 5.0
        assert config.debug is True
        assert config.id_key == "uid"
        assert config.error_message_prop == "message"

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESOURCEFUL_URL", "https://example.com/api/users")

        config = Config.from_env(base_url="/local", timeout=None)

        assert config.base_url == "/local"
        assert config.timeout == 30.0

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESOURCEFUL_TIMEOUT", "soon")

        with pytest.raises(ValidationError):
            Config.from_env()


class TestSetupLogging:
    def test_idempotent(self) -> None:
        logger = setup_logging(debug=True)
        setup_logging(debug=False)

        handlers = [h for h in logger.handlers if getattr(h, "_resourceful", False)]
        assert len(handlers) == 1
        assert logger.level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_debug_level(self) -> None:
        logger = setup_logging(debug=True)

        assert logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG
