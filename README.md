# jwkit

Plain data types for JSON Web Keys (RFC 7517, RFC 8037). It uses only the
standard library.

## What it gives you

- `jwkit.bytes`: `Bytes`, a byte wrapper that becomes Base64 text when you
  call `str()` on it. `Encoding` chooses the Base64 form: `STANDARD`,
  `STANDARD_NO_PAD`, `URL_SAFE` or `URL_SAFE_NO_PAD`. `Bytes.parse` reads
  Base64 text back. Trailing padding is optional when parsing. Text that is
  not valid Base64 raises `DecodeError`, which is a `ValueError`.
  `Bytes.to_json` gives Base64 text by default and raw bytes when
  `human_readable=False`. `Bytes.from_json` accepts Base64 text, raw bytes or
  a list of byte values. Two `Bytes` compare equal when their data is equal,
  whatever their encodings are.
- `jwkit.b64`: `encode_json` writes a JSON value as compact JSON in unpadded
  URL-safe Base64. `decode_json` reads it back.
- `jwkit.thumbprint`: `Thumbprint` holds the `x5t` and `x5t#S256` members.
  `MediaTyped` is the base for types that carry a media type in `TYPE`.
- `jwkit.jwk_params`: the enumerations `EllipticCurveType`,
  `OctetKeyPairType`, `Use` and `Operations`, and the common key
  `Parameters`: `alg`, `kid`, `use`, `key_ops`, `x5u`, `x5c` and the
  thumbprints. `x5c` certificates use standard padded Base64, not base64url.
- `jwkit.jwk`: the four key kinds:
  - `EllipticCurveKey`
  - `RsaKey`, with an optional `RsaPrivate` that may carry `RsaOtherPrimes`
  - `OctetsKey`
  - `OctetKeyPairKey`

  The module also has `Jwk`, `JwkSet` and `key_from_dict`, which picks the
  key kind from `kty`. `Jwk.TYPE` is `application/jwk+json` and
  `JwkSet.TYPE` is `application/jwk-set+json`.

Every model has `to_dict()` and a `from_dict()` class method. They convert to
and from the plain dictionaries that `json.loads` and `json.dumps` use.
Members that are absent are left out of the output.

## Install

```
pip install jwkit
```

To run the tests:

```
pip install "jwkit[test]"
pytest
```

## Example

```python
import json

from jwkit.jwk import Jwk, JwkSet

document = json.loads("""
{"keys": [{"kty": "OKP", "crv": "Ed25519", "kid": "example",
           "x": "11qYAYKxCrfVS_7TyWQHOg7hcvPapiMlrwIaaPcHURo"}]}
""")

keys = JwkSet.from_dict(document)
first = keys.keys[0]
print(first.prm.kid)            # example
print(len(bytes(first.key.x)))  # 32

assert keys.to_dict() == document
```

Base64 in different forms:

```python
from jwkit.bytes import Bytes, Encoding

raw = Bytes(b"\xfb\xff", Encoding.URL_SAFE_NO_PAD)
print(str(raw))                                   # -_8
print(Bytes.parse("+/8=", Encoding.STANDARD) == raw)  # True
```

## What it does not do

- It does not model JSON Web Signature documents or their headers.
- It does not create, sign, verify or encrypt anything. The types only hold
  key material and convert it to and from JSON.
- It does not check whether the key values are mathematically valid.