"""
Transparent Redirect Coordinator

Builds the gateway URLs and signed trData for browser form posts, and
confirms the gateway's redirect back to the merchant.

Flow:
    1. Merchant renders a form posting to url_for(resource, operation) with a
       hidden tr_data field from tr_data(...)
    2. Gateway redirects the browser to redirect_url with a signed query string
    3. confirm(query_string) verifies it and asks the gateway for the result
"""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Tuple, Union

from ..config import Configuration
from ..exceptions import DecodeError, ForgedQueryStringError, InvalidParamsError
from ..models.requests import CreditCardRequest, CustomerRequest
from ..models.results import Result
from .query_codec import decode, encode, flatten, parse_redirect_query_string
from .signature_service import SignatureService

if TYPE_CHECKING:
    from ..gateway import PaymentGateway

logger = logging.getLogger(__name__)


class ResourceKind(str, Enum):
    CUSTOMER = "customer"
    CREDIT_CARD = "credit_card"


class OperationKind(str, Enum):
    CREATE = "create"
    UPDATE = "update"


class TrKind(str, Enum):
    """The kind control field of trData and of the redirect query string."""
    CREATE_CUSTOMER = "create_customer"
    UPDATE_CUSTOMER = "update_customer"
    CREATE_PAYMENT_METHOD = "create_payment_method"
    UPDATE_PAYMENT_METHOD = "update_payment_method"


# (resource, operation) -> (path suffix, trData kind)
REDIRECT_ROUTES: Dict[Tuple[ResourceKind, OperationKind], Tuple[str, TrKind]] = {
    (ResourceKind.CUSTOMER, OperationKind.CREATE): (
        "/customers/all/create_via_transparent_redirect_request", TrKind.CREATE_CUSTOMER),
    (ResourceKind.CUSTOMER, OperationKind.UPDATE): (
        "/customers/all/update_via_transparent_redirect_request", TrKind.UPDATE_CUSTOMER),
    (ResourceKind.CREDIT_CARD, OperationKind.CREATE): (
        "/payment_methods/all/create_via_transparent_redirect_request", TrKind.CREATE_PAYMENT_METHOD),
    (ResourceKind.CREDIT_CARD, OperationKind.UPDATE): (
        "/payment_methods/all/update_via_transparent_redirect_request", TrKind.UPDATE_PAYMENT_METHOD),
}

TR_KIND_RESOURCES: Dict[TrKind, ResourceKind] = {
    tr_kind: resource for (resource, _), (_, tr_kind) in REDIRECT_ROUTES.items()
}

CONTROL_FIELDS = ("api_version", "kind", "public_key", "redirect_url", "time")

ConfirmationHandler = Callable[[str], Result]
TrRequest = Union[CreditCardRequest, CustomerRequest]


class TransparentRedirectGateway:
    """
    Transparent Redirect operations for one configured gateway.

    Confirmation handlers are looked up by resource kind; the default table
    routes customers and credit cards to their resource gateways.
    """

    def __init__(
        self,
        config: Configuration,
        handlers: Optional[Mapping[ResourceKind, ConfirmationHandler]] = None
    ):
        self.config = config
        self.handlers: Dict[ResourceKind, ConfirmationHandler] = dict(handlers or {})

    @classmethod
    def for_gateway(cls, gateway: "PaymentGateway") -> "TransparentRedirectGateway":
        return cls(gateway.config, {
            ResourceKind.CUSTOMER: gateway.customer.confirm_transparent_redirect_request,
            ResourceKind.CREDIT_CARD: gateway.credit_card.confirm_transparent_redirect_request,
        })

    # ------------------------------------------------------------------
    # Outgoing
    # ------------------------------------------------------------------

    def url_for(self, resource: ResourceKind, operation: OperationKind) -> str:
        """URL the browser form posts to. Pure string composition, no network."""
        path, _ = REDIRECT_ROUTES[(resource, operation)]
        return self.config.base_merchant_url() + path

    def tr_data(
        self,
        resource: ResourceKind,
        operation: OperationKind,
        tr_params: Union[TrRequest, Mapping[str, Any], None],
        redirect_url: str
    ) -> str:
        """
        Build signed trData for a browser form.

        Args:
            resource: Resource the form creates or updates
            operation: Create or update
            tr_params: Params the merchant fixes server side (customer_id,
                payment_method_token, options...); a request object or a
                params mapping
            redirect_url: Where the gateway sends the browser afterwards

        Returns:
            Encoded, signed query string for the tr_data hidden field

        Raises:
            InvalidParamsError: If tr_params set a control field
        """
        _, tr_kind = REDIRECT_ROUTES[(resource, operation)]

        if tr_params is None:
            params: Mapping[str, Any] = {}
        elif isinstance(tr_params, (CreditCardRequest, CustomerRequest)):
            params = tr_params.to_params()
        else:
            params = tr_params

        data = flatten(params)
        clashes = sorted(set(data) & set(CONTROL_FIELDS))
        if clashes:
            raise InvalidParamsError(
                f"tr_params may not set control fields: {', '.join(clashes)}",
                details={"fields": clashes}
            )

        data.update({
            "api_version": self.config.api_version,
            "kind": tr_kind.value,
            "public_key": self.config.public_key,
            "redirect_url": redirect_url,
            "time": datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S"),
        })

        payload = SignatureService(self.config.private_key).sign_fields(data)
        return encode(payload)

    def tr_data_for(self, request: TrRequest, redirect_url: str) -> str:
        """trData for a request object; the resource and operation come from the request."""
        resource = ResourceKind.CREDIT_CARD if isinstance(request, CreditCardRequest) else ResourceKind.CUSTOMER
        operation = OperationKind.UPDATE if request.is_update else OperationKind.CREATE
        return self.tr_data(resource, operation, request, redirect_url)

    def is_tr_data_valid(self, tr_data: str) -> bool:
        """True if tr_data is well formed and signed with this merchant's key."""
        try:
            payload = decode(tr_data, self.config.private_key)
        except (DecodeError, ForgedQueryStringError) as e:
            logger.debug(f"Invalid trData: {e}")
            return False
        return all(name in payload.data for name in CONTROL_FIELDS)

    # ------------------------------------------------------------------
    # Incoming
    # ------------------------------------------------------------------

    def confirm(self, query_string: str, expected: Optional[ResourceKind] = None) -> Result:
        """
        Confirm a transparent redirect.

        Verifies the query string, resolves the resource kind it was issued
        for, and dispatches to that resource's confirmation handler.
        Confirming the same query string again returns the same resource.

        Args:
            query_string: Query string from the redirect, without "?"
            expected: Reject query strings issued for another resource

        Raises:
            DecodeError: Malformed query string, unknown kind, missing id,
                or resource mismatch
            ForgedQueryStringError: Signature does not match
        """
        redirect = parse_redirect_query_string(query_string, self.config.private_key)

        try:
            tr_kind = TrKind(redirect.kind)
        except ValueError:
            raise DecodeError(f"Unknown transparent redirect kind: {redirect.kind!r}")
        if not redirect.id:
            raise DecodeError("Redirect query string has no id field")

        resource = TR_KIND_RESOURCES[tr_kind]
        if expected is not None and resource != expected:
            raise DecodeError(
                f"Query string is for a {resource.value} request, not {expected.value}",
                details={"kind": tr_kind.value}
            )

        handler = self.handlers.get(resource)
        if handler is None:
            raise DecodeError(f"No confirmation handler for {resource.value}")

        logger.info(f"Confirming transparent redirect {redirect.id} ({tr_kind.value})")
        return handler(redirect.id)
