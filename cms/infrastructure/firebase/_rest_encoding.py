"""Encode/decode Python values to/from Firestore REST API 'fields' format."""

import base64
import re
from datetime import datetime
from typing import Any

_SIMPLE_FIELD_RE = re.compile(r"^[A-Za-z_][A-Za-z_0-9]*$")


def _encode_value(v: Any) -> dict:
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        return {"timestampValue": v.strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: _encode_value(x) for k, x in v.items()}}}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def encode_document(data: dict[str, Any]) -> dict:
    """Convert a Python dict to a Firestore REST Document body ({"fields": ...})."""
    return {"fields": {k: _encode_value(v) for k, v in data.items()}}


def _decode_value(obj: dict) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return obj["doubleValue"]
    if "timestampValue" in obj:
        return datetime.fromisoformat(obj["timestampValue"].replace("Z", "+00:00"))
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: _decode_value(x) for k, x in fields.items()}
    return None


def decode_document(document: dict | None) -> dict:
    """Convert a Firestore REST Document ({"name", "fields", ...}) to a Python dict."""
    if not document:
        return {}
    return {k: _decode_value(v) for k, v in (document.get("fields") or {}).items()}


def _quote_segment(segment: str) -> str:
    """Backtick-quote a field path segment unless it is a simple identifier."""
    if _SIMPLE_FIELD_RE.match(segment):
        return segment
    escaped = segment.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


def merge_field_paths(data: dict[str, Any], prefix: tuple[str, ...] = ()) -> list[str]:
    """Return leaf field paths of data for an updateMask (set with merge).

    Nested maps are descended so a merge only touches the leaves present
    in data; empty maps are written as a whole.
    """
    paths: list[str] = []
    for key, value in data.items():
        parts = (*prefix, key)
        if isinstance(value, dict) and value:
            paths.extend(merge_field_paths(value, parts))
        else:
            paths.append(".".join(_quote_segment(p) for p in parts))
    return paths
