"""Media-type marker and X.509 certificate thumbprint parameters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from jwkit.bytes import Bytes, Encoding

_S1_KEY = "x5t"
_S256_KEY = "x5t#S256"


class MediaTyped:
    """Base for types that carry a media type in ``TYPE``."""

    TYPE: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(getattr(cls, "TYPE", None), str):
            raise TypeError(f"{cls.__name__} must define a str TYPE")


def _coerce(value: Any) -> Bytes | None:
    if value is None:
        return None
    if isinstance(value, Bytes):
        return Bytes(value.data, Encoding.URL_SAFE_NO_PAD)
    return Bytes(value, Encoding.URL_SAFE_NO_PAD)


@dataclass(frozen=True)
class Thumbprint:
    """SHA-1 and SHA-256 certificate thumbprints (``x5t`` and ``x5t#S256``)."""

    s1: Bytes | None = None
    s256: Bytes | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "s1", _coerce(self.s1))
        object.__setattr__(self, "s256", _coerce(self.s256))

    def to_dict(self) -> dict[str, str]:
        """Members to merge into an enclosing JSON object; absent values are omitted."""
        out: dict[str, str] = {}
        if self.s1 is not None:
            out[_S1_KEY] = str(self.s1)
        if self.s256 is not None:
            out[_S256_KEY] = str(self.s256)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Thumbprint:
        """Read thumbprints from a JSON object, ignoring unrelated members."""
        values = {}
        for attr, key in (("s1", _S1_KEY), ("s256", _S256_KEY)):
            raw = data.get(key)
            if raw is not None:
                values[attr] = Bytes.from_json(raw, Encoding.URL_SAFE_NO_PAD)
        return cls(**values)