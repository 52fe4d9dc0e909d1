"""Utilities for turning Adyen SDK results and errors into plain data.

Provides:
- `robust_parse_text` to parse response bodies that arrive as text
  (JSON, NDJSON, JSON followed by noise), falling back to the raw text
- `to_payload` to extract a JSON-ready body from an SDK result object
- `describe_error` to serialize an exception raised by the SDK into a dict
"""
from __future__ import annotations

import json
from typing import Any, Dict

_JSON_TYPES = (dict, list, str, int, float, bool)

# Attributes of Adyen exceptions that are worth surfacing to the caller
_ERROR_ATTRIBUTES = (
    "message",
    "status_code",
    "error_code",
    "psp",
    "url",
    "raw_response",
    "raw_request",
)


def robust_parse_text(text: str) -> Any:
    """Try to parse text as JSON. If it fails, try NDJSON (one JSON per line), then raw_decode the first JSON object, else return raw text.

    Returns the parsed Python object (dict/list/primitive) or the original text string if parsing failed.
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        pass

    try:
        lines = [ln for ln in text.splitlines() if ln.strip()]
        objs = [json.loads(ln) for ln in lines]
        if objs:
            return objs if len(objs) > 1 else objs[0]
    except ValueError:
        pass

    try:
        decoder = json.JSONDecoder()
        obj, _ = decoder.raw_decode(text.lstrip())
        return obj
    except ValueError:
        pass

    return text


def to_payload(response: Any) -> Any:
    """Return the JSON-ready body of an SDK response.

    AdyenResult objects carry the decoded body in `message`; when that is
    missing the raw body text is parsed instead. Plain values pass through.
    """
    if response is None or isinstance(response, _JSON_TYPES):
        return response
    message = getattr(response, "message", None)
    if message is not None:
        return robust_parse_text(message) if isinstance(message, str) else message
    raw = getattr(response, "raw_response", None)
    if raw:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        return robust_parse_text(raw)
    return str(response)


def describe_error(exc: BaseException) -> Dict[str, Any]:
    """Best-effort structured representation of an exception."""
    details: Dict[str, Any] = {"type": type(exc).__name__, "message": str(exc)}
    for attr in _ERROR_ATTRIBUTES:
        value = getattr(exc, attr, None)
        if value is None or value == "":
            continue
        if attr == "raw_response":
            if isinstance(value, bytes):
                value = value.decode("utf-8", errors="replace")
            if isinstance(value, str):
                value = robust_parse_text(value)
        details[attr] = value
    return details


def serialize_error(details: Dict[str, Any]) -> str:
    return json.dumps(details, default=str, ensure_ascii=False)
