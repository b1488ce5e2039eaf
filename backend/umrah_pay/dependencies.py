"""
Dependency providers — wires services for FastAPI routes.
Tests swap the gateway and booking sink through app.dependency_overrides.
"""
from functools import lru_cache

from fastapi import Depends

from umrah_pay.config import Settings, get_settings
from umrah_pay.services.booking_sink import BookingSink, LoggingBookingSink
from umrah_pay.services.catalog import Catalog
from umrah_pay.services.gateway import PaymentGateway, RazorpayClient
from umrah_pay.services.intent_service import PaymentIntentService
from umrah_pay.services.verification_service import PaymentVerificationService

_booking_sink = LoggingBookingSink()


@lru_cache()
def get_catalog() -> Catalog:
    """Catalog built once per process; never mutated."""
    return Catalog()


def get_gateway(settings: Settings = Depends(get_settings)) -> PaymentGateway:
    return RazorpayClient.from_settings(settings)


def get_booking_sink() -> BookingSink:
    return _booking_sink


def get_intent_service(
    catalog: Catalog = Depends(get_catalog),
    gateway: PaymentGateway = Depends(get_gateway),
) -> PaymentIntentService:
    return PaymentIntentService(catalog, gateway)


def get_verification_service(
    settings: Settings = Depends(get_settings),
    sink: BookingSink = Depends(get_booking_sink),
) -> PaymentVerificationService:
    return PaymentVerificationService(settings.RAZORPAY_KEY_SECRET, sink)
