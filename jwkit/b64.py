"""JSON values carried as URL-safe, unpadded Base64."""

from __future__ import annotations

import json
from typing import Any

from jwkit.bytes import Bytes, DecodeError, Encoding


def encode_json(value: Any) -> str:
    """Serialize ``value`` as compact JSON and encode it as URL-safe Base64."""
    buf = json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return str(Bytes(buf, Encoding.URL_SAFE_NO_PAD))


def decode_json(text: str) -> Any:
    """Decode URL-safe Base64 ``text`` and parse the result as JSON."""
    buf = Bytes.from_json(text, Encoding.URL_SAFE_NO_PAD)
    try:
        return json.loads(bytes(buf))
    except ValueError as exc:
        raise DecodeError("invalid JSON payload") from exc