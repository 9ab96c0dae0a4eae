"""
Gateway Exception Hierarchy

Every error the SDK raises carries a stable error code with a gateway: prefix.
Business-rule validation failures are not exceptions; they come back as
failed Result objects.
"""
from typing import Optional, Dict, Any


class GatewayError(Exception):
    """
    Base exception for all gateway SDK errors.

    Subclasses fix the error code; callers can branch on the class or on
    error_code when reporting.
    """

    error_code = "gateway:error"
    default_message = "Gateway error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to an error report."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(GatewayError):
    """
    Credentials or merchant settings are missing or invalid.

    Examples:
    - Signing with an empty private key
    - Building a merchant URL without a merchant id
    """

    error_code = "gateway:configuration"
    default_message = "Gateway is not configured"


class DecodeError(GatewayError):
    """
    A query string could not be decoded.

    Examples:
    - Pair without "="
    - Missing or duplicated hash field
    - Missing http_status on a redirect query string
    """

    error_code = "gateway:query_string:malformed"
    default_message = "Malformed query string"


class InvalidParamsError(GatewayError, ValueError):
    """
    Caller-supplied params cannot be sent.

    Examples:
    - trParams setting a control field such as kind or redirect_url
    """

    error_code = "gateway:params:invalid"
    default_message = "Invalid params"


class AuthenticationError(GatewayError):
    """API keys were rejected, or a signed payload failed authentication."""

    error_code = "gateway:authentication"
    default_message = "Authentication failed"


class ForgedQueryStringError(AuthenticationError):
    """
    Signature verification failed on a query string.

    The payload was tampered with in transit or was signed with different
    keys. Retrying cannot succeed.
    """

    error_code = "gateway:query_string:forged"
    default_message = "Query string signature does not match"


class AuthorizationError(GatewayError):
    """The authenticated merchant may not perform this operation."""

    error_code = "gateway:authorization"
    default_message = "Not authorized"


class NotFoundError(GatewayError):
    """The referenced resource does not exist."""

    error_code = "gateway:not_found"
    default_message = "Resource not found"


class TransportError(GatewayError):
    """
    Network or gateway infrastructure failure.

    The SDK does not retry; retry policy belongs to the transport.
    """

    error_code = "gateway:transport"
    default_message = "Gateway could not be reached"


class UpgradeRequiredError(TransportError):
    """The gateway no longer accepts this API version."""

    error_code = "gateway:upgrade_required"
    default_message = "API version is no longer supported"


class ServerError(TransportError):
    """The gateway failed while processing the request."""

    error_code = "gateway:server_error"
    default_message = "Gateway server error"


class DownForMaintenanceError(TransportError):
    """The gateway is temporarily unavailable."""

    error_code = "gateway:down_for_maintenance"
    default_message = "Gateway is down for maintenance"


class UnexpectedError(TransportError):
    """Unrecognised status code or unreadable response body."""

    error_code = "gateway:unexpected"
    default_message = "Unexpected gateway response"
