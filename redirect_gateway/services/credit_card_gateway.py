"""
Credit Card Gateway

Vault operations on credit cards plus their Transparent Redirect helpers.
"""
import logging
from typing import TYPE_CHECKING, Any, Mapping, Union

from ..exceptions import NotFoundError
from ..models.requests import CreditCardRequest
from ..models.resources import CreditCard
from ..models.results import Result
from .result_wrapper import wrap_response
from .transparent_redirect import OperationKind, ResourceKind

if TYPE_CHECKING:
    from ..gateway import PaymentGateway

logger = logging.getLogger(__name__)


class CreditCardGateway:

    def __init__(self, gateway: "PaymentGateway"):
        self.gateway = gateway
        self.config = gateway.config

    def create(self, request: CreditCardRequest) -> Result[CreditCard]:
        """
        Vault a new credit card.

        Returns:
            Result holding the card, or the validation errors and, when
            options.verify_card was set and the processor declined, the
            credit_card_verification
        """
        body = self.gateway.http.post("/payment_methods", request.to_params())
        return self._wrap(body)

    def find(self, token: str) -> CreditCard:
        """
        Find a card by token.

        Raises:
            NotFoundError: If the token is blank or no card has it
        """
        if token is None or not token.strip():
            raise NotFoundError("Credit card token is blank")
        body = self.gateway.http.get(f"/payment_methods/{token}")
        return CreditCard.model_validate(body["credit_card"])

    def update(self, token: str, request: CreditCardRequest) -> Result[CreditCard]:
        if token is None or not token.strip():
            raise NotFoundError("Credit card token is blank")
        body = self.gateway.http.put(f"/payment_methods/{token}", request.to_params())
        return self._wrap(body)

    def delete(self, token: str) -> None:
        if token is None or not token.strip():
            raise NotFoundError("Credit card token is blank")
        self.gateway.http.delete(f"/payment_methods/{token}")
        logger.info(f"Deleted credit card {token}")

    # ------------------------------------------------------------------
    # Transparent Redirect
    # ------------------------------------------------------------------

    def transparent_redirect_create_url(self) -> str:
        return self.gateway.transparent_redirect.url_for(ResourceKind.CREDIT_CARD, OperationKind.CREATE)

    def transparent_redirect_update_url(self) -> str:
        return self.gateway.transparent_redirect.url_for(ResourceKind.CREDIT_CARD, OperationKind.UPDATE)

    def tr_data_for_create(
        self,
        tr_params: Union[CreditCardRequest, Mapping[str, Any], None],
        redirect_url: str
    ) -> str:
        return self.gateway.transparent_redirect.tr_data(
            ResourceKind.CREDIT_CARD, OperationKind.CREATE, tr_params, redirect_url
        )

    def tr_data_for_update(
        self,
        tr_params: Union[CreditCardRequest, Mapping[str, Any], None],
        redirect_url: str
    ) -> str:
        return self.gateway.transparent_redirect.tr_data(
            ResourceKind.CREDIT_CARD, OperationKind.UPDATE, tr_params, redirect_url
        )

    def confirm_transparent_redirect(self, query_string: str) -> Result[CreditCard]:
        """
        Confirm a credit card create or update made through Transparent Redirect.

        Raises:
            DecodeError: If the query string was issued for another resource
        """
        return self.gateway.transparent_redirect.confirm(query_string, expected=ResourceKind.CREDIT_CARD)

    def confirm_transparent_redirect_request(self, request_id: str) -> Result[CreditCard]:
        body = self.gateway.http.post(f"/transparent_redirect_requests/{request_id}/confirm")
        return self._wrap(body)

    def _wrap(self, body) -> Result[CreditCard]:
        return wrap_response(body, "credit_card", CreditCard)
