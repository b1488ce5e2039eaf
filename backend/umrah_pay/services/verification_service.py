"""
Payment Verification Service — checks Razorpay checkout signatures.

Razorpay signs ``order_id|payment_id`` with HMAC-SHA256 under the key secret.
Verification is local and single-shot: no gateway call, no retries.
"""
import hashlib
import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from umrah_pay.exceptions import GatewayNotConfigured
from umrah_pay.services.booking_sink import BookingRecord, BookingSink, BookingStatus, LoggingBookingSink
from umrah_pay.services.catalog import FREE_APPLICATION_PACKAGE_ID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerificationResult:
    verified: bool
    booking_id: Optional[str] = None
    is_free_application: bool = False


def compute_signature(order_id: str, payment_id: str, secret: str) -> str:
    """Lowercase hex HMAC-SHA256 of ``order_id|payment_id`` keyed by ``secret``."""
    message = f"{order_id}|{payment_id}"
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_signature(order_id: str, payment_id: str, signature: Optional[str], secret: str) -> bool:
    """Constant-time comparison of the claimed signature against the expected one."""
    if not signature:
        return False
    expected = compute_signature(order_id, payment_id, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


def is_free_application(package_id: Optional[Union[int, str]]) -> bool:
    return package_id == FREE_APPLICATION_PACKAGE_ID


class PaymentVerificationService:
    """Verifies checkout signatures and hands verified bookings to a sink."""

    def __init__(self, key_secret: str, sink: Optional[BookingSink] = None):
        self.key_secret = key_secret
        self.sink = sink or LoggingBookingSink()

    async def verify(
        self,
        order_id: str,
        payment_id: str,
        signature: Optional[str],
        package_id: Optional[Union[int, str]] = None,
        customer_info: Optional[Dict[str, Any]] = None,
    ) -> VerificationResult:
        """Verify a payment and record the booking when the signature matches.

        A mismatch is a normal negative result with no side effects.

        Raises:
            GatewayNotConfigured: no key secret to verify against.
            PersistError: the sink failed to store a verified booking.
        """
        if not self.key_secret:
            raise GatewayNotConfigured("Razorpay key secret is not configured")

        if not verify_signature(order_id, payment_id, signature, self.key_secret):
            logger.warning("Payment verification failed for order %s", order_id)
            return VerificationResult(verified=False)

        free = is_free_application(package_id)
        booking = BookingRecord(
            order_id=order_id,
            payment_id=payment_id,
            package_id=package_id,
            customer_info=customer_info,
            status=BookingStatus.APPLICATION_RECEIVED if free else BookingStatus.CONFIRMED,
            created_at=datetime.now(timezone.utc),
        )
        logger.info("Payment verified for order %s (payment %s)", order_id, payment_id)
        await self.sink.record(booking)

        return VerificationResult(verified=True, booking_id=order_id, is_free_application=free)
