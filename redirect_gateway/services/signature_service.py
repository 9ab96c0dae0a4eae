"""
Signature Service for Transparent Redirect payloads

Implements HMAC-SHA1 signature generation and verification over the canonical
form of a flat field set.
"""
import hmac
import hashlib
from typing import Any, Iterable, Mapping, Optional, Tuple
from urllib.parse import quote

from ..exceptions import ConfigurationError
from ..models.payloads import SignedPayload


ALGORITHM = "HMAC-SHA1"

# Brackets and dots are the path separators of flattened keys
KEY_SAFE_CHARACTERS = "[]._-"


def quote_key(key: str) -> str:
    return quote(str(key), safe=KEY_SAFE_CHARACTERS)


def quote_value(value: Any) -> str:
    return quote(str(value), safe="")


def _token(key: str, value: Optional[str]) -> str:
    # A bare key and an empty value are different wire tokens
    return key if value is None else f"{key}={value}"


def create_canonical_string(pairs: Iterable[Tuple[str, Optional[str]]]) -> str:
    """
    Create canonical representation for signing.

    Args:
        pairs: (key, value) tokens exactly as they appear on the wire; value
            is None for a chunk with no "="

    Returns:
        Tokens sorted by key then value and joined with "&"
    """
    ordered = sorted(pairs, key=lambda pair: (pair[0], pair[1] is not None, pair[1] or ""))
    return "&".join(_token(key, value) for key, value in ordered)


def canonicalize(fields: Mapping[str, Any]) -> str:
    """
    Canonical string for a flat field mapping.

    Keys and values are percent-encoded first, so the canonical form is built
    from the same tokens that encode() writes to the query string.
    """
    return create_canonical_string(
        (quote_key(key), quote_value(value)) for key, value in fields.items()
    )


def _require_key(secret_key: str) -> bytes:
    if not secret_key:
        raise ConfigurationError("private_key is required to sign or verify payloads")
    return secret_key.encode("utf-8")


def sign(secret_key: str, canonical_string: str) -> str:
    """
    Sign a canonical string using HMAC-SHA1.

    Args:
        secret_key: Merchant private key, used as the HMAC key
        canonical_string: Output of canonicalize()

    Returns:
        Lowercase hexadecimal digest

    Raises:
        ConfigurationError: If secret_key is empty or None
    """
    return hmac.new(
        _require_key(secret_key),
        canonical_string.encode("utf-8"),
        hashlib.sha1
    ).hexdigest()


def verify(secret_key: str, canonical_string: str, signature: str) -> bool:
    """
    Verify a signature using constant-time comparison.

    Returns:
        True if signature matches, False otherwise
    """
    expected = sign(secret_key, canonical_string)
    if not isinstance(signature, str):
        return False
    return hmac.compare_digest(expected.encode("ascii"), signature.lower().encode("utf-8"))


class SignatureService:
    """Signs and verifies field sets with one merchant private key."""

    def __init__(self, private_key: str):
        _require_key(private_key)
        self.private_key = private_key

    def sign_fields(self, fields: Mapping[str, Any]) -> SignedPayload:
        data = {str(key): str(value) for key, value in fields.items()}
        return SignedPayload(data=data, signature=sign(self.private_key, canonicalize(data)))

    def is_valid(self, pairs: Iterable[Tuple[str, Optional[str]]], signature: str) -> bool:
        """Check a signature against raw (still percent-encoded) wire pairs."""
        return verify(self.private_key, create_canonical_string(pairs), signature)
