"""
Payment error taxonomy.

Validation errors are client-correctable (400/404), gateway errors come from
the payment provider (500) and are never retried here.
"""
from typing import Optional


class PaymentError(Exception):
    """Base class for every error raised by the payment services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PaymentValidationError(PaymentError):
    status_code = 400


class PackageNotFound(PaymentValidationError):
    status_code = 404

    def __init__(self, package_id: Optional[int] = None):
        super().__init__("Package not found")
        self.package_id = package_id


class InvalidPaymentType(PaymentValidationError):
    def __init__(self, payment_type: Optional[str] = None):
        super().__init__("Invalid payment type")
        self.payment_type = payment_type


class InvalidUpiId(PaymentValidationError):
    def __init__(self, upi_id: Optional[str] = None):
        super().__init__("Invalid UPI ID format")
        self.upi_id = upi_id


class GatewayError(PaymentError):
    """The payment provider rejected the call or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class GatewayNotConfigured(GatewayError):
    def __init__(self, message: str = "Razorpay credentials are not configured"):
        super().__init__(message)


class PersistError(PaymentError):
    """A booking sink failed to store a booking record."""
