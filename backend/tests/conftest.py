"""
Pytest configuration and fixtures.
"""
from typing import Any, Dict, Optional

import pytest
from fastapi.testclient import TestClient

from umrah_pay.config import Settings, get_settings
from umrah_pay.dependencies import get_booking_sink, get_gateway
from umrah_pay.main import app
from umrah_pay.services.booking_sink import InMemoryBookingSink
from umrah_pay.utils.rate_limiter import reset_rate_limits

TEST_SECRET = "testsecret"


class FakeGateway:
    """Stands in for Razorpay; echoes the order options back as a created order."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.calls: list[Dict[str, Any]] = []

    async def create_order(self, options: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(options)
        if self.error is not None:
            raise self.error
        return {
            "id": f"order_TEST{len(self.calls):04d}",
            "entity": "order",
            "amount": options["amount"],
            "currency": options["currency"],
            "receipt": options["receipt"],
            "status": "created",
        }


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        RAZORPAY_KEY_ID="rzp_test_key",
        RAZORPAY_KEY_SECRET=TEST_SECRET,
        FRONTEND_URL="https://umrahtours.example.com",
        LOG_TO_FILE=False,
    )


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def booking_sink() -> InMemoryBookingSink:
    return InMemoryBookingSink()


@pytest.fixture(autouse=True)
def _clear_rate_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def client(test_settings, fake_gateway, booking_sink):
    """TestClient with the gateway and booking sink replaced by fakes."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    app.dependency_overrides[get_booking_sink] = lambda: booking_sink
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
