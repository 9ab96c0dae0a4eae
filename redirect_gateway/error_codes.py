"""
Validation error codes reported by the gateway.

Messages may change between gateway releases; codes do not.
"""


class ErrorCodes:

    class Address:
        PostalCodeIsTooLong = "81808"
        PostalCodeInvalidCharacters = "81813"

    class CreditCard:
        CardholderNameIsTooLong = "81723"
        CustomerIdIsRequired = "91704"
        CustomerIdIsInvalid = "91705"
        CvvIsInvalid = "81707"
        ExpirationDateIsRequired = "81709"
        ExpirationDateIsInvalid = "81712"
        NumberIsRequired = "81714"
        NumberIsInvalid = "81715"
        PaymentMethodTokenIsInvalid = "91718"

    class Customer:
        EmailIsInvalid = "81604"
        IdIsInUse = "91609"
        IdIsInvalid = "91610"

    class TransparentRedirect:
        KindMismatch = "91801"


class VerificationStatus:
    Verified = "verified"
    ProcessorDeclined = "processor_declined"
    GatewayRejected = "gateway_rejected"
    Failed = "failed"
