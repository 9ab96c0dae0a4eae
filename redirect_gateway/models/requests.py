"""
Pydantic Request Models

Caller-side request objects for customers and credit cards. Each request
knows how to render itself as gateway params and which Transparent Redirect
operation it describes.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class AddressRequest(BaseModel):
    """Billing address attached to a credit card."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    street_address: Optional[str] = None
    extended_address: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country_name: Optional[str] = None


class CreditCardOptionsRequest(BaseModel):
    """Processing options for a credit card request."""
    verify_card: Optional[bool] = None
    make_default: Optional[bool] = None


class CreditCardRequest(BaseModel):
    """
    Create or update a credit card.

    payment_method_token identifies the card to update in a Transparent
    Redirect; it is sent as a top-level param, not inside credit_card.
    """
    customer_id: Optional[str] = None
    token: Optional[str] = None
    number: Optional[str] = None
    expiration_date: Optional[str] = Field(default=None, description="MM/YY or MM/YYYY")
    cvv: Optional[str] = None
    cardholder_name: Optional[str] = None
    billing_address: Optional[AddressRequest] = None
    options: Optional[CreditCardOptionsRequest] = None
    payment_method_token: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.payment_method_token is not None:
            params["payment_method_token"] = self.payment_method_token
        card = self.model_dump(exclude_none=True, exclude={"payment_method_token"})
        if card:
            params["credit_card"] = card
        return params

    @property
    def is_update(self) -> bool:
        return self.payment_method_token is not None


class CustomerRequest(BaseModel):
    """
    Create or update a customer.

    customer_id identifies the customer to update in a Transparent Redirect;
    id sets the id of a new customer.
    """
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    customer_id: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.customer_id is not None:
            params["customer_id"] = self.customer_id
        customer = self.model_dump(exclude_none=True, exclude={"customer_id"})
        if customer:
            params["customer"] = customer
        return params

    @property
    def is_update(self) -> bool:
        return self.customer_id is not None
