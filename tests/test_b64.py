import pytest

from jwkit.b64 import decode_json, encode_json
from jwkit.bytes import Bytes, DecodeError, Encoding


def test_encode_protected_header():
    assert encode_json({"alg": "RS256"}) == "eyJhbGciOiJSUzI1NiJ9"


def test_decode_protected_headers():
    assert decode_json("eyJhbGciOiJSUzI1NiJ9") == {"alg": "RS256"}
    assert decode_json("eyJhbGciOiJFUzI1NiJ9") == {"alg": "ES256"}


def test_decode_payload():
    payload = (
        "eyJpc3MiOiJqb2UiLA0KICJleHAiOjEzMDA4MTkzODAsDQogImh0dHA6Ly9leGFtcGxl"
        "LmNvbS9pc19yb290Ijp0cnVlfQ"
    )
    assert decode_json(payload) == {
        "iss": "joe",
        "exp": 1300819380,
        "http://example.com/is_root": True,
    }


@pytest.mark.parametrize(
    "value",
    [
        {"alg": "ES256", "kid": "e9bc097a-ce51-4036-9562-d2ade882db0d"},
        [1, 2, 3],
        "héllo",
        None,
        {"nested": {"list": [True, False, 1.5]}},
    ],
)
def test_round_trip(value):
    assert decode_json(encode_json(value)) == value


def test_output_is_url_safe_unpadded():
    # The JSON text '"??>"' needs the 63rd alphabet symbol and one pad character.
    text = encode_json("??>")
    assert text == "Ij8_PiI"
    assert decode_json(text) == "??>"


def test_invalid_base64():
    with pytest.raises(DecodeError):
        decode_json("not*base64")


def test_invalid_json():
    text = str(Bytes(b"not json", Encoding.URL_SAFE_NO_PAD))
    with pytest.raises(DecodeError, match="invalid JSON"):
        decode_json(text)