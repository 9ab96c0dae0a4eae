"""
Customer Gateway

Vault operations on customers plus their Transparent Redirect helpers.
"""
import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from ..exceptions import NotFoundError
from ..models.requests import CustomerRequest
from ..models.resources import Customer
from ..models.results import Result
from .result_wrapper import wrap_response
from .transparent_redirect import OperationKind, ResourceKind

if TYPE_CHECKING:
    from ..gateway import PaymentGateway

logger = logging.getLogger(__name__)


def _require_id(customer_id: Optional[str]) -> str:
    if customer_id is None or not customer_id.strip():
        raise NotFoundError("Customer id is blank")
    return customer_id


class CustomerGateway:

    def __init__(self, gateway: "PaymentGateway"):
        self.gateway = gateway
        self.config = gateway.config

    def create(self, request: Optional[CustomerRequest] = None) -> Result[Customer]:
        params = (request or CustomerRequest()).to_params()
        body = self.gateway.http.post("/customers", params or {"customer": {}})
        return self._wrap(body)

    def find(self, customer_id: str) -> Customer:
        body = self.gateway.http.get(f"/customers/{_require_id(customer_id)}")
        return Customer.model_validate(body["customer"])

    def update(self, customer_id: str, request: CustomerRequest) -> Result[Customer]:
        body = self.gateway.http.put(f"/customers/{_require_id(customer_id)}", request.to_params())
        return self._wrap(body)

    def delete(self, customer_id: str) -> None:
        self.gateway.http.delete(f"/customers/{_require_id(customer_id)}")
        logger.info(f"Deleted customer {customer_id}")

    def transparent_redirect_create_url(self) -> str:
        return self.gateway.transparent_redirect.url_for(ResourceKind.CUSTOMER, OperationKind.CREATE)

    def transparent_redirect_update_url(self) -> str:
        return self.gateway.transparent_redirect.url_for(ResourceKind.CUSTOMER, OperationKind.UPDATE)

    def tr_data_for_create(
        self,
        tr_params: Union[CustomerRequest, Mapping[str, Any], None],
        redirect_url: str
    ) -> str:
        return self.gateway.transparent_redirect.tr_data(
            ResourceKind.CUSTOMER, OperationKind.CREATE, tr_params, redirect_url
        )

    def tr_data_for_update(
        self,
        tr_params: Union[CustomerRequest, Mapping[str, Any], None],
        redirect_url: str
    ) -> str:
        return self.gateway.transparent_redirect.tr_data(
            ResourceKind.CUSTOMER, OperationKind.UPDATE, tr_params, redirect_url
        )

    def confirm_transparent_redirect(self, query_string: str) -> Result[Customer]:
        return self.gateway.transparent_redirect.confirm(query_string, expected=ResourceKind.CUSTOMER)

    def confirm_transparent_redirect_request(self, request_id: str) -> Result[Customer]:
        body = self.gateway.http.post(f"/transparent_redirect_requests/{request_id}/confirm")
        return self._wrap(body)

    def _wrap(self, body) -> Result[Customer]:
        return wrap_response(body, "customer", Customer)
