"""
Payment Failure Recorder — best-effort log of failures reported by the checkout.
"""
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class PaymentFailureRecorder:
    """Always acknowledges; nothing is validated or stored."""

    @staticmethod
    def record(order_id: Optional[str], payment_id: Optional[str], error_info: Any = None) -> bool:
        logger.warning(
            "Payment failed: order_id=%s payment_id=%s error=%s",
            order_id, payment_id, error_info,
        )
        return True
