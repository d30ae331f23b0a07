"""Path, base URL and query string composition."""

import re
from typing import Any, Mapping
from urllib.parse import quote

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_SLASHES = re.compile(r"/{2,}")

# Same set of unescaped characters as ECMAScript's encodeURIComponent.
_COMPONENT_SAFE = "-_.!~*'()"


def split_method(verb_path: str, default: str = "GET") -> tuple[str, str]:
    """Split ``"METHOD /path"`` into its method and path.

    The first space-delimited token is only taken as the method when it is
    entirely uppercase, otherwise the whole string is the path.
    """
    head, sep, rest = verb_path.partition(" ")
    if head.isupper():
        return head, rest
    return default, verb_path


def normalize_path(path: str) -> str:
    """Return ``path`` with exactly one leading slash and no trailing slash.

    The root path is ``/``.
    """
    path = _SLASHES.sub("/", path.strip().strip("/"))
    return "/" + path


def normalize_base_url(url: str) -> str:
    """Collapse duplicate slashes in ``url`` and drop trailing ones.

    A leading ``scheme://`` is kept verbatim.
    """
    match = _SCHEME.match(url)
    prefix = match.group(0) if match else ""
    rest = url[len(prefix) :]
    return prefix + _SLASHES.sub("/", rest).rstrip("/")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(query: Mapping[str, Any]) -> str:
    """Percent-encode ``query`` keys and values in mapping order.

    ``None`` values are left out. Returns an empty string when nothing
    remains, otherwise the string includes its leading ``?``.
    """
    query = {k: v for k, v in query.items() if v is not None}
    if not query:
        return ""
    pairs = (
        f"{quote(_stringify(key), safe=_COMPONENT_SAFE)}"
        f"={quote(_stringify(value), safe=_COMPONENT_SAFE)}"
        for key, value in query.items()
    )
    return "?" + "&".join(pairs)


def join_url(base_url: str, relative_url: str) -> str:
    return normalize_base_url(base_url) + relative_url
