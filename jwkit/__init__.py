"""Data types for JSON Web Keys and their Base64 encodings."""

__version__ = "0.4.0"
__all__ = ["bytes", "b64", "thumbprint", "jwk_params", "jwk"]