"""Common JSON Web Key parameters and the enumerations they use."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from jwkit.bytes import Bytes, Encoding
from jwkit.thumbprint import Thumbprint


class EllipticCurveType(str, Enum):
    """Curves allowed for ``EC`` keys (``crv``)."""

    P256 = "P-256"
    P384 = "P-384"
    P521 = "P-521"
    SECP256K1 = "secp256k1"


class OctetKeyPairType(str, Enum):
    """Curves allowed for ``OKP`` keys (``crv``)."""

    ED25519 = "Ed25519"
    ED448 = "Ed448"
    X25519 = "X25519"
    X448 = "X448"


class Use(str, Enum):
    """Intended use of a public key (``use``)."""

    ENCRYPTION = "enc"
    SIGNING = "sig"


class Operations(str, Enum):
    """Operations a key may be used for (``key_ops``), in lexicographic order."""

    DECRYPT = "decrypt"
    DERIVE_BITS = "deriveBits"
    DERIVE_KEY = "deriveKey"
    ENCRYPT = "encrypt"
    SIGN = "sign"
    UNWRAP_KEY = "unwrapKey"
    VERIFY = "verify"
    WRAP_KEY = "wrapKey"

    @property
    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Operations):
            return NotImplemented
        return self._rank < other._rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Operations):
            return NotImplemented
        return self._rank <= other._rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Operations):
            return NotImplemented
        return self._rank > other._rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Operations):
            return NotImplemented
        return self._rank >= other._rank

    def __hash__(self) -> int:
        return hash(self.value)


def _check_url(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected URL string, got {type(value).__name__}")
    parts = urlsplit(value)
    if not parts.scheme:
        raise ValueError(f"relative URL without a base: {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _optional_list(data: Mapping[str, Any], key: str) -> list[Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"{key!r} must be an array, got {type(value).__name__}")
    return value


def _standard_bytes(value: Any) -> Bytes:
    if isinstance(value, Bytes):
        return Bytes(value.data, Encoding.STANDARD)
    return Bytes(value, Encoding.STANDARD)


@dataclass(frozen=True)
class Parameters:
    """Parameters shared by every JSON Web Key, as defined in RFC 7517 section 4."""

    alg: str | None = None
    kid: str | None = None
    key_use: Use | None = None
    key_ops: frozenset[Operations] | None = None
    x5u: str | None = None
    x5c: tuple[Bytes, ...] | None = None
    x5t: Thumbprint = field(default_factory=Thumbprint)

    def __post_init__(self) -> None:
        if self.key_use is not None:
            object.__setattr__(self, "key_use", Use(self.key_use))
        if self.key_ops is not None:
            ops: Iterable[Any] = self.key_ops
            object.__setattr__(self, "key_ops", frozenset(Operations(op) for op in ops))
        if self.x5u is not None:
            _check_url(self.x5u)
        if self.x5c is not None:
            object.__setattr__(self, "x5c", tuple(_standard_bytes(c) for c in self.x5c))
        if not isinstance(self.x5t, Thumbprint):
            raise TypeError("x5t must be a Thumbprint")

    def to_dict(self) -> dict[str, Any]:
        """Members to merge into a key's JSON object; absent values are omitted."""
        out: dict[str, Any] = {}
        if self.alg is not None:
            out["alg"] = self.alg
        if self.kid is not None:
            out["kid"] = self.kid
        if self.key_use is not None:
            out["use"] = self.key_use.value
        if self.key_ops is not None:
            out["key_ops"] = [op.value for op in sorted(self.key_ops)]
        if self.x5u is not None:
            out["x5u"] = self.x5u
        if self.x5c is not None:
            out["x5c"] = [str(cert) for cert in self.x5c]
        out.update(self.x5t.to_dict())
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Parameters:
        """Read parameters from a key's JSON object, ignoring unrelated members."""
        use = _optional_str(data, "use")
        ops = _optional_list(data, "key_ops")
        x5u = _optional_str(data, "x5u")
        x5c = _optional_list(data, "x5c")
        return cls(
            alg=_optional_str(data, "alg"),
            kid=_optional_str(data, "kid"),
            key_use=Use(use) if use is not None else None,
            key_ops=frozenset(Operations(op) for op in ops) if ops is not None else None,
            x5u=_check_url(x5u) if x5u is not None else None,
            x5c=(
                tuple(Bytes.from_json(cert, Encoding.STANDARD) for cert in x5c)
                if x5c is not None
                else None
            ),
            x5t=Thumbprint.from_dict(data),
        )