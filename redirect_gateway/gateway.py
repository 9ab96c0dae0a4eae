"""
Gateway facade

PaymentGateway wires one Configuration to the HTTP client, the resource
gateways and the Transparent Redirect coordinator.

    gateway = PaymentGateway.from_settings()
    url = gateway.credit_card.transparent_redirect_create_url()
    tr_data = gateway.credit_card.tr_data_for_create(
        CreditCardRequest(customer_id="1234"), "https://merchant.example/cards/confirm"
    )
    ...
    result = gateway.credit_card.confirm_transparent_redirect(query_string)
    if result.is_success:
        card = result.target
"""
from typing import Optional

from .config import Configuration, Settings
from .models.results import Result
from .services.credit_card_gateway import CreditCardGateway
from .services.customer_gateway import CustomerGateway
from .services.http import Http, Transport
from .services.transparent_redirect import TransparentRedirectGateway, TrRequest


class PaymentGateway:

    def __init__(self, config: Configuration, transport: Optional[Transport] = None):
        self.config = config
        self.http = Http(config, transport)
        self.customer = CustomerGateway(self)
        self.credit_card = CreditCardGateway(self)
        self.transparent_redirect = TransparentRedirectGateway.for_gateway(self)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None
    ) -> "PaymentGateway":
        return cls(Configuration.from_settings(settings or Settings()), transport)

    def tr_data(self, request: TrRequest, redirect_url: str) -> str:
        """Signed trData for a customer or credit card request."""
        return self.transparent_redirect.tr_data_for(request, redirect_url)

    def confirm_transparent_redirect(self, query_string: str) -> Result:
        """Confirm a redirect for any resource kind."""
        return self.transparent_redirect.confirm(query_string)
