"""
Services package.

Signing, query string codec, HTTP transport, result wrapping, the
Transparent Redirect coordinator and the resource gateways.
"""
from .signature_service import SignatureService, canonicalize, sign, verify
from .query_codec import (
    decode,
    encode,
    flatten,
    parse_redirect_query_string,
    unflatten,
)
from .http import GatewayRequest, GatewayResponse, Http, RequestsTransport, Transport
from .result_wrapper import wrap_response
from .transparent_redirect import (
    OperationKind,
    ResourceKind,
    TransparentRedirectGateway,
    TrKind,
)
from .credit_card_gateway import CreditCardGateway
from .customer_gateway import CustomerGateway

__all__ = [
    "SignatureService",
    "canonicalize",
    "sign",
    "verify",
    "decode",
    "encode",
    "flatten",
    "parse_redirect_query_string",
    "unflatten",
    "GatewayRequest",
    "GatewayResponse",
    "Http",
    "RequestsTransport",
    "Transport",
    "wrap_response",
    "OperationKind",
    "ResourceKind",
    "TransparentRedirectGateway",
    "TrKind",
    "CreditCardGateway",
    "CustomerGateway",
]
