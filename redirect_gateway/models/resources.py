"""
Pydantic Resource Models

Gateway resources as returned by find, create, update and confirm calls.
Unknown fields in gateway responses are ignored.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class Address(BaseModel):
    """Billing address."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    street_address: Optional[str] = None
    extended_address: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country_name: Optional[str] = None

    model_config = {"extra": "ignore"}


class CreditCard(BaseModel):
    """
    Vaulted credit card.

    The gateway never returns the full number; only bin and last_four.
    """
    token: str
    customer_id: Optional[str] = None
    bin: str
    last_four: str
    expiration_month: str
    expiration_year: str
    cardholder_name: Optional[str] = None
    card_type: Optional[str] = None
    default: bool = False
    billing_address: Optional[Address] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}

    @property
    def expiration_date(self) -> str:
        return f"{self.expiration_month}/{self.expiration_year}"

    @property
    def masked_number(self) -> str:
        return f"{self.bin}******{self.last_four}"


class Customer(BaseModel):
    """Vault customer and its cards."""
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    credit_cards: List[CreditCard] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class CreditCardVerification(BaseModel):
    """Outcome of verifying a card with the processor."""
    id: Optional[str] = None
    status: str
    processor_response_code: Optional[str] = None
    processor_response_text: Optional[str] = None
    gateway_rejection_reason: Optional[str] = None

    model_config = {"extra": "ignore"}
