"""
Validators — UPI id checks, receipt tokens and UPI deep links.
"""
import time
import uuid
from typing import Optional
from urllib.parse import quote

UPI_PAYEE_NAME = "UmrahTours"
UPI_NOTE = "UmrahPackagePayment"


def validate_upi_id(upi_id: Optional[str]) -> bool:
    """A UPI id (VPA) must be non-empty and carry the user@provider separator."""
    if not upi_id:
        return False
    return "@" in upi_id


def generate_receipt(package_id: int, prefix: str = "umrah") -> str:
    """Receipt token unique per request: prefix, package, epoch ms, random suffix.

    Razorpay caps receipts at 40 characters.
    """
    millis = int(time.time() * 1000)
    return f"{prefix}_{package_id}_{millis}_{uuid.uuid4().hex[:6]}"


def build_upi_deep_link(upi_id: str, amount: int, currency: str = "INR") -> str:
    """UPI intent link for the given payee VPA and decimal-unit amount."""
    return (
        f"upi://pay?pa={quote(upi_id, safe='@.-_')}&pn={UPI_PAYEE_NAME}"
        f"&am={amount}&cu={currency}&tn={UPI_NOTE}"
    )
