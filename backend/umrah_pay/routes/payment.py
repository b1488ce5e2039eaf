"""
Payment Routes — Razorpay order creation, checkout verification, failure reports.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from umrah_pay.config import get_settings
from umrah_pay.dependencies import get_intent_service, get_verification_service
from umrah_pay.exceptions import GatewayError, PersistError
from umrah_pay.schemas.schemas import (
    AckResponse, CreateOrderRequest, CreateOrderResponse,
    CreateUpiIntentRequest, CreateUpiIntentResponse,
    VerifyPaymentRequest, VerifyPaymentResponse,
)
from umrah_pay.services.failure_recorder import PaymentFailureRecorder
from umrah_pay.services.intent_service import PaymentIntentService
from umrah_pay.services.verification_service import PaymentVerificationService
from umrah_pay.utils.rate_limiter import rate_limit

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/api", tags=["Payment"])

order_throttle = rate_limit(
    requests=settings.ORDER_RATE_LIMIT_REQUESTS,
    window=settings.ORDER_RATE_LIMIT_WINDOW,
)


def _gateway_failure(label: str, exc: GatewayError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": label, "message": exc.message},
    )


@router.post("/create-order", response_model=CreateOrderResponse)
async def create_order(
    payload: CreateOrderRequest,
    service: PaymentIntentService = Depends(get_intent_service),
    _throttle: bool = Depends(order_throttle),
):
    """Create a Razorpay order for a package (full price or initial deposit)."""
    try:
        receipt = await service.create_intent(
            payload.package_id, payload.payment_type, payload.customer_info,
        )
    except GatewayError as exc:
        logger.error("Error creating order: %s", exc.message)
        return _gateway_failure("Failed to create order", exc)

    return CreateOrderResponse(
        order_id=receipt.order_id,
        amount=receipt.amount,
        currency=receipt.currency,
        package_name=receipt.package_name,
    )


@router.post("/create-upi-intent", response_model=CreateUpiIntentResponse)
async def create_upi_intent(
    payload: CreateUpiIntentRequest,
    service: PaymentIntentService = Depends(get_intent_service),
    _throttle: bool = Depends(order_throttle),
):
    """Create a Razorpay order for UPI and return a upi:// deep link."""
    try:
        receipt = await service.create_upi_intent(
            payload.package_id, payload.payment_type, payload.upi_id, payload.customer_info,
        )
    except GatewayError as exc:
        logger.error("Error creating UPI intent: %s", exc.message)
        return _gateway_failure("Failed to create UPI payment", exc)

    return CreateUpiIntentResponse(
        order_id=receipt.order_id,
        amount=receipt.amount,
        currency=receipt.currency,
        package_name=receipt.package_name,
        upi_id=receipt.upi_id,
        deep_link=receipt.deep_link,
    )


@router.post("/verify-payment", response_model=VerifyPaymentResponse)
async def verify_payment(
    payload: VerifyPaymentRequest,
    service: PaymentVerificationService = Depends(get_verification_service),
):
    """Verify the checkout signature and record the booking."""
    try:
        result = await service.verify(
            payload.razorpay_order_id,
            payload.razorpay_payment_id,
            payload.razorpay_signature,
            package_id=payload.package_id,
            customer_info=payload.customer_info,
        )
    except (GatewayError, PersistError) as exc:
        logger.error("Error verifying payment for order %s: %s", payload.razorpay_order_id, exc.message)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Error verifying payment", "error": exc.message},
        )

    if not result.verified:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Payment verification failed"},
        )

    return VerifyPaymentResponse(
        success=True,
        message="Payment verified successfully",
        booking_id=result.booking_id,
        is_free_application=result.is_free_application,
    )


@router.post("/payment-failed", response_model=AckResponse)
async def payment_failed(request: Request):
    """Record a failure reported by the checkout. Always acknowledged, whatever the body."""
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        payload = {}
    PaymentFailureRecorder.record(payload.get("order_id"), payload.get("payment_id"), payload.get("error"))
    return AckResponse(message="Payment failure recorded")
