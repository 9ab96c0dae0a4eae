"""
Result Wrapper

Turns a gateway response body into a Result: the resource on success, the
validation error tree on failure.
"""
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel

from ..exceptions import UnexpectedError
from ..models.resources import CreditCardVerification
from ..models.results import Result, ValidationErrorCollection


ERROR_RESPONSE_KEY = "api_error_response"

M = TypeVar("M", bound=BaseModel)


def wrap_response(body: Dict[str, Any], resource_key: str, resource_cls: Type[M]) -> Result[M]:
    """
    Wrap a gateway response body.

    Args:
        body: Parsed response body
        resource_key: Top-level key of the resource ("credit_card", "customer")
        resource_cls: Model the resource is parsed into

    Returns:
        Result.success(resource) or Result.failure(errors, message)

    Raises:
        UnexpectedError: If the body holds neither the resource nor errors
    """
    if ERROR_RESPONSE_KEY in body:
        error_response = body[ERROR_RESPONSE_KEY]
        verification = error_response.get("verification")
        return Result.failure(
            errors=ValidationErrorCollection(error_response.get("errors")),
            message=error_response.get("message") or "",
            credit_card_verification=(
                CreditCardVerification.model_validate(verification) if verification else None
            ),
            params=error_response.get("params") or {},
        )

    if resource_key in body:
        return Result.success(resource_cls.model_validate(body[resource_key]))

    raise UnexpectedError(
        f"Response has neither {resource_key!r} nor {ERROR_RESPONSE_KEY!r}",
        details={"keys": sorted(body)}
    )
