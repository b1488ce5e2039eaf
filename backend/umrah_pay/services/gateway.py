"""
Razorpay Gateway Client — order creation over the Razorpay Orders API.

Only order creation talks to the network. Signature verification is local
(see verification_service).
"""
import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from umrah_pay.exceptions import GatewayError, GatewayNotConfigured

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    async def create_order(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Create a payable order; returns at least ``id``, ``amount`` and ``currency``."""
        ...


class RazorpayClient:
    """Async client for ``POST /v1/orders``.

    A caller that disconnects may abandon the call, but an order the provider
    already created is not rolled back; it simply stays unpaid.
    """

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        base_url: str = "https://api.razorpay.com/v1",
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings) -> "RazorpayClient":
        return cls(
            key_id=settings.RAZORPAY_KEY_ID,
            key_secret=settings.RAZORPAY_KEY_SECRET,
            base_url=settings.RAZORPAY_API_BASE,
            timeout=settings.RAZORPAY_TIMEOUT_SECONDS,
        )

    async def create_order(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Create an order.

        Args:
            options: Razorpay order body (amount in paise, currency, receipt, notes).

        Returns:
            The order as returned by Razorpay.

        Raises:
            GatewayNotConfigured: key id or secret missing.
            GatewayError: network failure, timeout or a non-2xx reply.
        """
        if not self.key_id or not self.key_secret:
            raise GatewayNotConfigured()

        url = f"{self.base_url}/orders"
        try:
            async with httpx.AsyncClient(
                auth=(self.key_id, self.key_secret),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(url, json=options)
                response.raise_for_status()
                return response.json()

        except httpx.TimeoutException as e:
            logger.error("Razorpay order request timed out after %ss: %s", self.timeout, e)
            raise GatewayError(f"Payment gateway timed out after {self.timeout}s") from e

        except httpx.HTTPStatusError as e:
            message, code = _error_details(e.response)
            logger.error("Razorpay API error: %s - %s", e.response.status_code, message)
            raise GatewayError(message, status_code=e.response.status_code, code=code) from e

        except httpx.HTTPError as e:
            logger.error("Failed to reach Razorpay at %s: %s", url, e)
            raise GatewayError(f"Cannot reach payment gateway: {e}") from e


def _error_details(response: httpx.Response) -> tuple[str, Optional[str]]:
    """Pull ``error.description`` and ``error.code`` out of a Razorpay error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}", None
    error = (body.get("error") if isinstance(body, dict) else None) or {}
    message = error.get("description") or response.text or f"HTTP {response.status_code}"
    return message, error.get("code")
