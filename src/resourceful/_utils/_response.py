import json
import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .constants import HEADER_CONTENT_TYPE


@dataclass
class Response:
    """Outcome of one transport call.

    ``status`` is ``None`` when the transport could not produce one.
    ``data`` is the decoded payload: parsed JSON, else parsed XML, else the
    raw body. Byte bodies are handed over as they are. ``error`` is set
    iff the call is classified as failed.
    """

    status: Optional[int] = None
    reason: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[Union[str, bytes]] = None
    json: Any = None
    xml: Optional[ElementTree.Element] = None
    data: Any = None
    error: Optional[str] = None
    exception: Optional[BaseException] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and self.status is not None and self.status < 400


def _parse_json(body: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(body)
    except ValueError:
        return False, None


def _parse_xml(body: str, headers: Mapping[str, str]) -> Optional[ElementTree.Element]:
    if "xml" not in headers.get(HEADER_CONTENT_TYPE, ""):
        return None
    try:
        return ElementTree.fromstring(body)
    except ElementTree.ParseError:
        return None


def decode_payload(response: Response) -> Response:
    """Fill ``json``, ``xml`` and ``data`` from the raw body of ``response``."""
    body = response.body
    if not body:
        response.data = None
        return response
    if isinstance(body, bytes):
        response.data = body
        return response

    parsed, value = _parse_json(body)
    if parsed:
        response.json = value
        response.data = value
        return response

    response.xml = _parse_xml(body, response.headers)
    response.data = response.xml if response.xml is not None else body
    return response
