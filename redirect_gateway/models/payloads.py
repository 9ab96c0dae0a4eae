"""
Pydantic Signed Payload Models

Wire-level shapes of the Transparent Redirect protocol: the signed field set
carried in trData and in redirect query strings, and the decoded redirect.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class SignedPayload(BaseModel):
    """
    Flat field set plus its HMAC-SHA1 signature.

    Keys are flattened field paths (credit_card.number, items[0].name); values
    are already stringified. The signature covers the canonical form of data.
    """

    data: Dict[str, str] = Field(
        description="Flattened field path -> string value, in insertion order"
    )
    signature: str = Field(
        description="HMAC-SHA1 digest in lowercase hexadecimal",
        pattern="^[0-9a-f]{40}$"
    )

    model_config = {"frozen": True}


class RedirectQueryString(BaseModel):
    """Verified query string appended by the gateway to the merchant redirect URL."""

    http_status: int
    id: Optional[str] = None
    kind: Optional[str] = None
    message: Optional[str] = None
    fields: Dict[str, Any] = Field(
        default_factory=dict,
        description="All decoded fields, unflattened into a nested mapping"
    )

    model_config = {"frozen": True}
