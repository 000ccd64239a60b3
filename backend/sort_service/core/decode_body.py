"""Request Body Decoding: raw bytes + content type → decoded JSON value or Missing.

Invariants:
    - decode_json_body is PURE: never raises for bad input, returns Missing instead
    - Only the application/json media type (any parameters) is parsed; anything else is Missing
    - An empty body is Missing, never an empty JSON value
"""

import json
from dataclasses import dataclass
from typing import Any

JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class Missing:
    """Marker for a body that could not be read as JSON."""
    reason: str


def is_json_media_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


def decode_json_body(raw: bytes, content_type: str | None) -> Any:
    """Decode a request body. Returns the JSON value or a Missing marker."""
    if not raw or not raw.strip():
        return Missing("empty body")
    if not is_json_media_type(content_type):
        return Missing(f"unsupported content type {content_type or 'none'!r}")
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        return Missing("unparseable JSON")
