"""Byte strings that render as Base64 in text contexts."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from string import ascii_letters, digits
from typing import Any

_STANDARD_ALPHABET = frozenset(ascii_letters + digits + "+/")
_URL_SAFE_ALPHABET = frozenset(ascii_letters + digits + "-_")


class DecodeError(ValueError):
    """Raised when text is not valid Base64 for the chosen encoding."""


class Encoding(Enum):
    """The Base64 variants a byte string can be rendered in."""

    STANDARD = ("standard", False, True)
    STANDARD_NO_PAD = ("standard-no-pad", False, False)
    URL_SAFE = ("url-safe", True, True)
    URL_SAFE_NO_PAD = ("url-safe-no-pad", True, False)

    def __init__(self, label: str, url_safe: bool, padded: bool) -> None:
        self.label = label
        self.url_safe = url_safe
        self.padded = padded

    @property
    def _alphabet(self) -> frozenset[str]:
        return _URL_SAFE_ALPHABET if self.url_safe else _STANDARD_ALPHABET

    def encode(self, data: bytes) -> str:
        """Render ``data`` as Base64 text in this variant."""
        raw = bytes(data)
        encoded = base64.urlsafe_b64encode(raw) if self.url_safe else base64.b64encode(raw)
        text = encoded.decode("ascii")
        return text if self.padded else text.rstrip("=")

    def decode(self, text: str) -> bytes:
        """Parse Base64 text in this variant; trailing padding is optional."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        body = text.rstrip("=")
        padding = len(text) - len(body)
        if padding > 2:
            raise DecodeError("invalid padding")
        alphabet = self._alphabet
        for offset, char in enumerate(body):
            if char not in alphabet:
                raise DecodeError(f"invalid byte {char!r} at offset {offset}")
        if len(body) % 4 == 1:
            raise DecodeError("invalid length")
        if padding and (len(body) + padding) % 4:
            raise DecodeError("invalid padding")
        canonical = body + "=" * (-len(body) % 4)
        try:
            data = base64.b64decode(
                canonical, altchars=b"-_" if self.url_safe else None, validate=True
            )
        except binascii.Error as exc:
            raise DecodeError(str(exc)) from exc
        if self.encode(data).rstrip("=") != body:
            raise DecodeError("invalid last symbol")
        return data


@dataclass(frozen=True, order=True)
class Bytes:
    """Raw bytes that convert to and from Base64 in string contexts."""

    data: bytes = b""
    encoding: Encoding = field(default=Encoding.STANDARD, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.data, (int, str)):
            raise TypeError(f"cannot build bytes from {type(self.data).__name__}")
        object.__setattr__(self, "data", bytes(self.data))
        if not isinstance(self.encoding, Encoding):
            raise TypeError("encoding must be an Encoding member")

    def __str__(self) -> str:
        return self.encoding.encode(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __getitem__(self, index: Any) -> Any:
        return self.data[index]

    def __repr__(self) -> str:
        return f"Bytes({self.data!r})"

    @classmethod
    def parse(cls, text: str, encoding: Encoding = Encoding.STANDARD) -> Bytes:
        """Decode Base64 ``text`` in the given variant."""
        return cls(encoding.decode(text), encoding)

    def to_json(self, human_readable: bool = True) -> str | bytes:
        """Base64 text for human-readable formats, raw bytes otherwise."""
        return str(self) if human_readable else self.data

    @classmethod
    def from_json(cls, value: Any, encoding: Encoding = Encoding.STANDARD) -> Bytes:
        """Build from Base64 text, or from raw bytes or a sequence of byte values."""
        if isinstance(value, str):
            try:
                return cls.parse(value, encoding)
            except DecodeError as exc:
                raise DecodeError("invalid base64") from exc
        if isinstance(value, (bytes, bytearray, memoryview, list, tuple)):
            return cls(bytes(value), encoding)
        raise TypeError(f"cannot read bytes from {type(value).__name__}")