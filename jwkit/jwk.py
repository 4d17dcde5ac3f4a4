"""JSON Web Keys and key sets, as defined in RFC 7517 and RFC 8037."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from jwkit.bytes import Bytes, Encoding
from jwkit.jwk_params import EllipticCurveType, OctetKeyPairType, Parameters
from jwkit.thumbprint import MediaTyped

_RSA_PRIVATE_FIELDS = ("d", "p", "q", "dp", "dq", "qi")


def _b64(value: Any) -> Bytes:
    if isinstance(value, Bytes):
        return Bytes(value.data, Encoding.URL_SAFE_NO_PAD)
    return Bytes(value, Encoding.URL_SAFE_NO_PAD)


def _optional_b64(value: Any) -> Bytes | None:
    return None if value is None else _b64(value)


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _read(data: Mapping[str, Any], key: str) -> Bytes:
    value = data.get(key)
    if value is None:
        raise ValueError(f"missing field {key!r}")
    return Bytes.from_json(value, Encoding.URL_SAFE_NO_PAD)


def _read_optional(data: Mapping[str, Any], key: str) -> Bytes | None:
    value = data.get(key)
    if value is None:
        return None
    return Bytes.from_json(value, Encoding.URL_SAFE_NO_PAD)


def _read_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        raise ValueError(f"missing field {key!r}")
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class RsaOtherPrimes:
    """Additional prime information for multi-prime RSA keys (``oth``)."""

    r: Bytes = field(repr=False)
    d: Bytes = field(repr=False)
    t: Bytes = field(repr=False)

    def __post_init__(self) -> None:
        for name in ("r", "d", "t"):
            object.__setattr__(self, name, _b64(getattr(self, name)))

    def to_dict(self) -> dict[str, str]:
        """JSON object with ``r``, ``d`` and ``t``."""
        return {"r": str(self.r), "d": str(self.d), "t": str(self.t)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RsaOtherPrimes:
        """Read prime information from a JSON object."""
        data = _require_mapping(data, "other primes entry")
        return cls(r=_read(data, "r"), d=_read(data, "d"), t=_read(data, "t"))


@dataclass(frozen=True)
class RsaPrivate:
    """Private members of an RSA key."""

    d: Bytes = field(repr=False)
    p: Bytes = field(repr=False)
    q: Bytes = field(repr=False)
    dp: Bytes = field(repr=False)
    dq: Bytes = field(repr=False)
    qi: Bytes = field(repr=False)
    oth: tuple[RsaOtherPrimes, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        for name in _RSA_PRIVATE_FIELDS:
            object.__setattr__(self, name, _b64(getattr(self, name)))
        others: Iterable[RsaOtherPrimes] = self.oth
        object.__setattr__(self, "oth", tuple(others))

    def to_dict(self) -> dict[str, Any]:
        """Members to merge into an RSA key object; ``oth`` is omitted when empty."""
        out: dict[str, Any] = {name: str(getattr(self, name)) for name in _RSA_PRIVATE_FIELDS}
        if self.oth:
            out["oth"] = [prime.to_dict() for prime in self.oth]
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RsaPrivate:
        """Read the private members from an RSA key object."""
        data = _require_mapping(data, "RSA private key")
        raw_oth = data.get("oth")
        if raw_oth is None:
            raw_oth = []
        if not isinstance(raw_oth, list):
            raise TypeError(f"'oth' must be an array, got {type(raw_oth).__name__}")
        values = {name: _read(data, name) for name in _RSA_PRIVATE_FIELDS}
        return cls(**values, oth=tuple(RsaOtherPrimes.from_dict(item) for item in raw_oth))


@dataclass(frozen=True)
class EllipticCurveKey:
    """An elliptic curve key (``kty`` ``EC``)."""

    kty: ClassVar[str] = "EC"

    crv: EllipticCurveType
    x: Bytes
    y: Bytes
    d: Bytes | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "crv", EllipticCurveType(self.crv))
        object.__setattr__(self, "x", _b64(self.x))
        object.__setattr__(self, "y", _b64(self.y))
        object.__setattr__(self, "d", _optional_b64(self.d))

    def to_dict(self) -> dict[str, Any]:
        """JSON members of the key, including ``kty``."""
        out: dict[str, Any] = {"kty": self.kty, "crv": self.crv.value}
        if self.d is not None:
            out["d"] = str(self.d)
        out["x"] = str(self.x)
        out["y"] = str(self.y)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EllipticCurveKey:
        """Read an EC key from a JSON object."""
        data = _require_mapping(data, "EC key")
        return cls(
            crv=EllipticCurveType(_read_str(data, "crv")),
            x=_read(data, "x"),
            y=_read(data, "y"),
            d=_read_optional(data, "d"),
        )


@dataclass(frozen=True)
class RsaKey:
    """An RSA key (``kty`` ``RSA``), optionally with its private members."""

    kty: ClassVar[str] = "RSA"

    n: Bytes
    e: Bytes
    prv: RsaPrivate | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "n", _b64(self.n))
        object.__setattr__(self, "e", _b64(self.e))
        if self.prv is not None and not isinstance(self.prv, RsaPrivate):
            raise TypeError("prv must be an RsaPrivate")

    def to_dict(self) -> dict[str, Any]:
        """JSON members of the key, including ``kty``."""
        out: dict[str, Any] = {"kty": self.kty, "n": str(self.n), "e": str(self.e)}
        if self.prv is not None:
            out.update(self.prv.to_dict())
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RsaKey:
        """Read an RSA key; private members count only when all are present."""
        data = _require_mapping(data, "RSA key")
        has_private = all(data.get(name) is not None for name in _RSA_PRIVATE_FIELDS)
        return cls(
            n=_read(data, "n"),
            e=_read(data, "e"),
            prv=RsaPrivate.from_dict(data) if has_private else None,
        )


@dataclass(frozen=True)
class OctetsKey:
    """A symmetric key (``kty`` ``oct``)."""

    kty: ClassVar[str] = "oct"

    k: Bytes = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "k", _b64(self.k))

    def to_dict(self) -> dict[str, Any]:
        """JSON members of the key, including ``kty``."""
        return {"kty": self.kty, "k": str(self.k)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OctetsKey:
        """Read a symmetric key from a JSON object."""
        data = _require_mapping(data, "oct key")
        return cls(k=_read(data, "k"))


@dataclass(frozen=True)
class OctetKeyPairKey:
    """An octet key pair (``kty`` ``OKP``), as defined in RFC 8037."""

    kty: ClassVar[str] = "OKP"

    crv: OctetKeyPairType
    x: Bytes
    d: Bytes | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "crv", OctetKeyPairType(self.crv))
        object.__setattr__(self, "x", _b64(self.x))
        object.__setattr__(self, "d", _optional_b64(self.d))

    def to_dict(self) -> dict[str, Any]:
        """JSON members of the key, including ``kty``."""
        out: dict[str, Any] = {"kty": self.kty, "crv": self.crv.value}
        if self.d is not None:
            out["d"] = str(self.d)
        out["x"] = str(self.x)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OctetKeyPairKey:
        """Read an OKP key from a JSON object."""
        data = _require_mapping(data, "OKP key")
        return cls(
            crv=OctetKeyPairType(_read_str(data, "crv")),
            x=_read(data, "x"),
            d=_read_optional(data, "d"),
        )


Key = Union[EllipticCurveKey, RsaKey, OctetsKey, OctetKeyPairKey]

_KEY_TYPES: dict[str, type[Any]] = {
    cls.kty: cls for cls in (EllipticCurveKey, RsaKey, OctetsKey, OctetKeyPairKey)
}


def key_from_dict(data: Mapping[str, Any]) -> Key:
    """Read key material from a JSON object, choosing the type by ``kty``."""
    data = _require_mapping(data, "key")
    kty = _read_str(data, "kty")
    try:
        key_type = _KEY_TYPES[kty]
    except KeyError:
        raise ValueError(f"unknown key type {kty!r}") from None
    return key_type.from_dict(data)


@dataclass(frozen=True)
class Jwk(MediaTyped):
    """A JSON Web Key: key material plus common parameters."""

    TYPE: ClassVar[str] = "application/jwk+json"

    key: Key
    prm: Parameters = field(default_factory=Parameters)

    def __post_init__(self) -> None:
        if not isinstance(self.key, tuple(_KEY_TYPES.values())):
            raise TypeError(f"unsupported key {type(self.key).__name__}")
        if not isinstance(self.prm, Parameters):
            raise TypeError("prm must be Parameters")

    def to_dict(self) -> dict[str, Any]:
        """A single JSON object holding the key and its parameters."""
        out = self.key.to_dict()
        out.update(self.prm.to_dict())
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Jwk:
        """Read a key and its parameters from one JSON object."""
        data = _require_mapping(data, "JWK")
        return cls(key=key_from_dict(data), prm=Parameters.from_dict(data))


@dataclass(frozen=True)
class JwkSet(MediaTyped):
    """A set of JSON Web Keys."""

    TYPE: ClassVar[str] = "application/jwk-set+json"

    keys: tuple[Jwk, ...] = ()

    def __post_init__(self) -> None:
        keys: Iterable[Jwk] = self.keys
        object.__setattr__(self, "keys", tuple(keys))

    def to_dict(self) -> dict[str, Any]:
        """JSON object with a ``keys`` array."""
        return {"keys": [jwk.to_dict() for jwk in self.keys]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JwkSet:
        """Read a key set from a JSON object."""
        data = _require_mapping(data, "JWK set")
        keys = data.get("keys")
        if keys is None:
            raise ValueError("missing field 'keys'")
        if not isinstance(keys, list):
            raise TypeError(f"'keys' must be an array, got {type(keys).__name__}")
        return cls(keys=tuple(Jwk.from_dict(item) for item in keys))