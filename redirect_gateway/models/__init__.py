"""
Models package.

Request objects, gateway resources, signed payloads and results.
"""
from .payloads import SignedPayload, RedirectQueryString
from .requests import (
    AddressRequest,
    CreditCardOptionsRequest,
    CreditCardRequest,
    CustomerRequest,
)
from .resources import Address, CreditCard, CreditCardVerification, Customer
from .results import Result, ValidationError, ValidationErrorCollection

__all__ = [
    "SignedPayload",
    "RedirectQueryString",
    "AddressRequest",
    "CreditCardOptionsRequest",
    "CreditCardRequest",
    "CustomerRequest",
    "Address",
    "CreditCard",
    "CreditCardVerification",
    "Customer",
    "Result",
    "ValidationError",
    "ValidationErrorCollection",
]
