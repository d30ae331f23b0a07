from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from ._utils.constants import (
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_ERROR_MESSAGE_PROP,
    ENV_ID_KEY,
    ENV_TIMEOUT,
)

_ENV_FIELDS = {
    "base_url": ENV_BASE_URL,
    "timeout": ENV_TIMEOUT,
    "debug": ENV_DEBUG,
    "id_key": ENV_ID_KEY,
    "error_message_prop": ENV_ERROR_MESSAGE_PROP,
}


class Config(BaseModel):
    base_url: str = "/"
    timeout: float = 30.0
    debug: bool = False
    id_key: str = "id"
    error_message_prop: Optional[str] = None
    follow_redirects: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a config from ``RESOURCEFUL_*`` variables (and a ``.env`` file).

        Keyword overrides win over the environment; anything left unset
        falls back to the model defaults.
        """
        load_dotenv()

        values: dict[str, Any] = {}
        for name, variable in _ENV_FIELDS.items():
            value = env.get(variable)
            if value:
                values[name] = value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
