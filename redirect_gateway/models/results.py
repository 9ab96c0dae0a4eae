"""
Result Models

Result is the uniform outcome of every gateway-mutating call: either the
resolved resource, or a navigable tree of validation errors plus a message.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from .resources import CreditCardVerification


T = TypeVar("T")


class ValidationError(BaseModel):
    """A single validation error: the field, a stable code, and a message."""
    attribute: str
    code: str
    message: str

    model_config = {"frozen": True}


class ValidationErrorCollection:
    """
    Validation errors at one level of the params tree.

    The gateway reports errors nested the same way params are nested:

        {"credit_card": {"errors": [...], "billing_address": {"errors": [...]}}}

    so result.errors.for_object("credit_card").on("number") lists the errors
    on credit_card.number.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = data or {"errors": []}

    @property
    def errors(self) -> List[ValidationError]:
        """Errors at this level only."""
        return [ValidationError(**error) for error in self.data.get("errors", [])]

    @property
    def deep_errors(self) -> List[ValidationError]:
        """Errors at this level and every nested level."""
        result = list(self.errors)
        for nested in self._nested.values():
            result.extend(nested.deep_errors)
        return result

    @property
    def size(self) -> int:
        return len(self.errors)

    @property
    def deep_size(self) -> int:
        return len(self.deep_errors)

    def on(self, attribute: str) -> List[ValidationError]:
        return [error for error in self.errors if error.attribute == attribute]

    def for_object(self, key: str) -> "ValidationErrorCollection":
        return self._nested.get(key, ValidationErrorCollection())

    def for_index(self, index: int) -> "ValidationErrorCollection":
        return self.for_object(f"index_{index}")

    @property
    def _nested(self) -> Dict[str, "ValidationErrorCollection"]:
        return {
            key: ValidationErrorCollection(value)
            for key, value in self.data.items()
            if key != "errors" and isinstance(value, dict)
        }

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> ValidationError:
        return self.errors[index]

    def __repr__(self) -> str:
        return f"ValidationErrorCollection(deep_size={self.deep_size})"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Success or failure of a gateway call.

    Exactly one variant is populated: target on success; errors and message
    on failure. Build with Result.success() or Result.failure().
    """
    target: Optional[T] = None
    errors: Optional[ValidationErrorCollection] = None
    message: Optional[str] = None
    credit_card_verification: Optional[CreditCardVerification] = None
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if (self.target is None) == (self.errors is None):
            raise ValueError("Result needs exactly one of target or errors")
        if self.errors is None:
            if self.message is not None or self.credit_card_verification is not None:
                raise ValueError("A successful Result carries no message or verification")
        elif self.message is None:
            raise ValueError("A failed Result needs a message")

    @classmethod
    def success(cls, target: T) -> "Result[T]":
        return cls(target=target)

    @classmethod
    def failure(
        cls,
        errors: ValidationErrorCollection,
        message: str,
        credit_card_verification: Optional[CreditCardVerification] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> "Result[T]":
        return cls(
            errors=errors,
            message=message,
            credit_card_verification=credit_card_verification,
            params=params or {},
        )

    @property
    def is_success(self) -> bool:
        return self.errors is None
