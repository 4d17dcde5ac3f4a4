import pytest

from jwkit.bytes import Bytes, DecodeError, Encoding
from jwkit.jwk_params import (
    EllipticCurveType,
    OctetKeyPairType,
    Operations,
    Parameters,
    Use,
)
from jwkit.thumbprint import Thumbprint

CERT_PREFIX = bytes(
    [48, 130, 3, 66, 48, 130, 2, 42, 160, 3, 2, 1, 2, 2, 6, 1, 60, 255, 22, 226, 226]
)
CERT_PREFIX_B64 = "MIIDQjCCAiqgAwIBAgIGATz/FuLi"


def test_enum_wire_names():
    assert EllipticCurveType("P-256") is EllipticCurveType.P256
    assert EllipticCurveType("secp256k1") is EllipticCurveType.SECP256K1
    assert OctetKeyPairType("Ed25519") is OctetKeyPairType.ED25519
    assert OctetKeyPairType("X448") is OctetKeyPairType.X448
    assert Use("enc") is Use.ENCRYPTION
    assert Use("sig") is Use.SIGNING


def test_unknown_enum_value_rejected():
    with pytest.raises(ValueError):
        EllipticCurveType("P-999")
    with pytest.raises(ValueError):
        Use("both")


def test_all_operations_serialize_in_lexicographic_order():
    params = Parameters(key_ops=set(Operations))
    assert params.to_dict()["key_ops"] == [
        "decrypt",
        "deriveBits",
        "deriveKey",
        "encrypt",
        "sign",
        "unwrapKey",
        "verify",
        "wrapKey",
    ]


def test_default_parameters_serialize_empty():
    assert Parameters().to_dict() == {}
    assert Parameters.from_dict({}) == Parameters()


def test_rfc_style_parameters():
    params = Parameters.from_dict({"kty": "RSA", "use": "sig", "kid": "1b94c"})
    assert params == Parameters(kid="1b94c", key_use=Use.SIGNING)
    assert params.to_dict() == {"kid": "1b94c", "use": "sig"}


def test_alg_and_kid():
    params = Parameters(alg="RS256", kid="2011-04-29")
    assert params.to_dict() == {"alg": "RS256", "kid": "2011-04-29"}


def test_key_ops_sorted_and_deduplicated():
    params = Parameters.from_dict({"key_ops": ["verify", "sign", "verify"]})
    assert params.key_ops == frozenset({Operations.SIGN, Operations.VERIFY})
    assert params.to_dict()["key_ops"] == ["sign", "verify"]


def test_key_ops_invalid():
    with pytest.raises(ValueError):
        Parameters.from_dict({"key_ops": ["fly"]})
    with pytest.raises(TypeError):
        Parameters.from_dict({"key_ops": "sign"})


def test_x5c_uses_standard_alphabet():
    params = Parameters(x5c=[CERT_PREFIX])
    assert params.to_dict() == {"x5c": [CERT_PREFIX_B64]}
    parsed = Parameters.from_dict({"x5c": [CERT_PREFIX_B64]})
    assert parsed.x5c == (Bytes(CERT_PREFIX, Encoding.STANDARD),)
    assert parsed.x5c[0].encoding is Encoding.STANDARD


def test_x5c_invalid_base64():
    with pytest.raises(DecodeError):
        Parameters.from_dict({"x5c": ["not base64!"]})


def test_x5u_round_trip_and_validation():
    params = Parameters.from_dict({"x5u": "https://example.com/certs"})
    assert params.x5u == "https://example.com/certs"
    assert Parameters.from_dict(params.to_dict()) == params
    with pytest.raises(ValueError):
        Parameters.from_dict({"x5u": "certs/chain.pem"})


def test_thumbprint_is_flattened():
    thumb = Thumbprint(s1=b"\x01\x02\x03", s256=b"\x04\x05")
    params = Parameters(kid="k", x5t=thumb)
    out = params.to_dict()
    assert set(out) == {"kid", "x5t", "x5t#S256"}
    assert Parameters.from_dict(out) == params


def test_null_members_are_absent():
    params = Parameters.from_dict({"alg": None, "kid": None, "use": None})
    assert params == Parameters()


def test_wrong_member_type():
    with pytest.raises(TypeError):
        Parameters.from_dict({"kid": 5})


def test_full_round_trip():
    params = Parameters(
        alg="ES256",
        kid="e9bc097a-ce51-4036-9562-d2ade882db0d",
        key_use=Use.ENCRYPTION,
        key_ops={Operations.WRAP_KEY, Operations.DECRYPT},
        x5c=[CERT_PREFIX],
    )
    out = params.to_dict()
    assert out["key_ops"] == ["decrypt", "wrapKey"]
    assert out["use"] == "enc"
    assert Parameters.from_dict(out) == params


def test_unrelated_members_ignored():
    params = Parameters.from_dict({"kty": "EC", "crv": "P-256", "kid": "1", "use": "enc"})
    assert params == Parameters(kid="1", key_use=Use.ENCRYPTION)