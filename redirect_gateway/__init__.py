"""
redirect-gateway

Client SDK for a card-vault payment gateway: Transparent Redirect signing,
query string verification and confirmation, with business outcomes returned
as Result objects.
"""
__version__ = "0.1.0"

from .config import Configuration, Credentials, Settings, configure_logging
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    DownForMaintenanceError,
    ForgedQueryStringError,
    GatewayError,
    InvalidParamsError,
    NotFoundError,
    ServerError,
    TransportError,
    UnexpectedError,
    UpgradeRequiredError,
)
from .error_codes import ErrorCodes, VerificationStatus
from .models import (
    AddressRequest,
    CreditCard,
    CreditCardOptionsRequest,
    CreditCardRequest,
    CreditCardVerification,
    Customer,
    CustomerRequest,
    Result,
)
from .services import OperationKind, ResourceKind, TrKind
from .gateway import PaymentGateway

__all__ = [
    "__version__",
    "Configuration",
    "Credentials",
    "Settings",
    "configure_logging",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "DecodeError",
    "DownForMaintenanceError",
    "ForgedQueryStringError",
    "GatewayError",
    "InvalidParamsError",
    "NotFoundError",
    "ServerError",
    "TransportError",
    "UnexpectedError",
    "UpgradeRequiredError",
    "ErrorCodes",
    "VerificationStatus",
    "AddressRequest",
    "CreditCard",
    "CreditCardOptionsRequest",
    "CreditCardRequest",
    "CreditCardVerification",
    "Customer",
    "CustomerRequest",
    "Result",
    "OperationKind",
    "ResourceKind",
    "TrKind",
    "PaymentGateway",
]
