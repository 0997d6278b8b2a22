"""Request body serialization shared by the client adapters."""
import dataclasses
import json
from typing import Any, Optional, Tuple

from ..headers import HttpHeaders

JSON_CONTENT_TYPE = 'application/json'


def serialize_body(body: Any) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Serialize a request body to bytes.

    str and bytes are sent verbatim (str as utf-8). Dataclasses, objects
    with ``to_dict`` and plain JSON values are encoded as JSON.

    Returns:
        (payload, content type to default to) - both None for no body
    """
    if body is None:
        return None, None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body), None
    if isinstance(body, str):
        return body.encode('utf-8'), None

    if dataclasses.is_dataclass(body) and not isinstance(body, type):
        body = dataclasses.asdict(body)
    elif hasattr(body, 'to_dict'):
        body = body.to_dict()
    return json.dumps(body).encode('utf-8'), JSON_CONTENT_TYPE


def prepare_request(headers: HttpHeaders, body: Any) -> Tuple[HttpHeaders, Optional[bytes]]:
    """
    Serialize body and fill in a default Content-Type.

    Returns:
        Writable copy of headers and the payload
    """
    headers = headers.copy()
    payload, content_type = serialize_body(body)
    if content_type and 'Content-Type' not in headers:
        headers.add('Content-Type', content_type)
    return headers, payload
