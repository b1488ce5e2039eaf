"""
Tests for amount computation and Razorpay order creation.
"""
import re

import pytest

from conftest import FakeGateway
from umrah_pay.exceptions import GatewayError, InvalidPaymentType, InvalidUpiId, PackageNotFound
from umrah_pay.schemas.schemas import CustomerInfo
from umrah_pay.services.catalog import Catalog
from umrah_pay.services.intent_service import (
    INITIAL_DEPOSIT_AMOUNT,
    PaymentIntentService,
    compute_amount,
    to_minor_units,
)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def service(catalog, fake_gateway) -> PaymentIntentService:
    return PaymentIntentService(catalog, fake_gateway)


class TestComputeAmount:

    @pytest.mark.parametrize("package_id", [1, 2, 3, 999])
    def test_full_is_package_price(self, catalog, package_id):
        pkg = catalog.get_by_id(package_id)
        assert compute_amount(pkg, "full") == pkg.price

    @pytest.mark.parametrize("package_id", [1, 2, 3, 999])
    def test_initial_is_fixed_deposit(self, catalog, package_id):
        assert compute_amount(catalog.get_by_id(package_id), "initial") == 10000 == INITIAL_DEPOSIT_AMOUNT

    @pytest.mark.parametrize("payment_type", ["FULL", "partial", "", None, "initial ", 10000])
    def test_other_payment_types_rejected(self, catalog, payment_type):
        with pytest.raises(InvalidPaymentType):
            compute_amount(catalog.get_by_id(1), payment_type)

    def test_minor_units(self):
        assert to_minor_units(69999) == 6999900


class TestCreateIntent:

    @pytest.mark.asyncio
    async def test_full_payment_for_essential_package(self, service, fake_gateway):
        receipt = await service.create_intent(1, "full", CustomerInfo(name="Aisha", email="aisha@example.com"))

        options = fake_gateway.calls[0]
        assert options["amount"] == 6999900
        assert options["currency"] == "INR"
        assert options["notes"] == {
            "package_name": "Essential Package",
            "customer_name": "Aisha",
            "customer_email": "aisha@example.com",
            "customer_phone": "9999999999",
            "payment_type": "full",
        }
        assert receipt.order_id == "order_TEST0001"
        assert receipt.amount == 6999900
        assert receipt.currency == "INR"
        assert receipt.package_name == "Essential Package"

    @pytest.mark.asyncio
    async def test_initial_payment_ignores_package_price(self, service, fake_gateway):
        await service.create_intent(3, "initial")
        assert fake_gateway.calls[0]["amount"] == 1000000

    @pytest.mark.asyncio
    async def test_missing_customer_info_uses_placeholders(self, service, fake_gateway):
        await service.create_intent(2, "full", None)
        notes = fake_gateway.calls[0]["notes"]
        assert notes["customer_name"] == "Customer"
        assert notes["customer_email"] == "customer@example.com"
        assert notes["customer_phone"] == "9999999999"

    @pytest.mark.asyncio
    async def test_empty_customer_fields_use_placeholders(self, service, fake_gateway):
        await service.create_intent(2, "full", CustomerInfo(name="", email="", phone="9876543210"))
        notes = fake_gateway.calls[0]["notes"]
        assert notes["customer_name"] == "Customer"
        assert notes["customer_email"] == "customer@example.com"
        assert notes["customer_phone"] == "9876543210"

    @pytest.mark.asyncio
    async def test_receipt_format_and_uniqueness(self, service, fake_gateway):
        for _ in range(5):
            await service.create_intent(1, "full")
        receipts = [call["receipt"] for call in fake_gateway.calls]
        assert len(set(receipts)) == 5
        for receipt in receipts:
            assert re.fullmatch(r"umrah_1_\d{13}_[0-9a-f]{6}", receipt)
            assert len(receipt) <= 40

    @pytest.mark.asyncio
    async def test_unknown_package_never_reaches_gateway(self, service, fake_gateway):
        with pytest.raises(PackageNotFound):
            await service.create_intent(42, "full")
        assert fake_gateway.calls == []

    @pytest.mark.asyncio
    async def test_invalid_payment_type_never_reaches_gateway(self, service, fake_gateway):
        with pytest.raises(InvalidPaymentType):
            await service.create_intent(1, "emi")
        assert fake_gateway.calls == []

    @pytest.mark.asyncio
    async def test_gateway_error_propagates(self, catalog):
        gateway = FakeGateway(error=GatewayError("Authentication failed", status_code=401))
        service = PaymentIntentService(catalog, gateway)
        with pytest.raises(GatewayError, match="Authentication failed"):
            await service.create_intent(1, "full")


class TestCreateUpiIntent:

    @pytest.mark.asyncio
    async def test_upi_order(self, service, fake_gateway):
        receipt = await service.create_upi_intent(2, "full", "pilgrim@okaxis", CustomerInfo(name="Yusuf"))

        options = fake_gateway.calls[0]
        assert options["amount"] == 7999900
        assert options["notes"]["upi_id"] == "pilgrim@okaxis"
        assert options["notes"]["payment_method"] == "upi"
        assert options["notes"]["customer_name"] == "Yusuf"
        assert options["receipt"].startswith("umrah_upi_2_")
        assert receipt.upi_id == "pilgrim@okaxis"
        assert receipt.amount == 7999900
        assert receipt.deep_link == (
            "upi://pay?pa=pilgrim@okaxis&pn=UmrahTours&am=79999&cu=INR&tn=UmrahPackagePayment"
        )

    @pytest.mark.asyncio
    async def test_deep_link_uses_deposit_amount(self, service):
        receipt = await service.create_upi_intent(3, "initial", "family.trip@ybl")
        assert "&am=10000&" in receipt.deep_link

    @pytest.mark.asyncio
    @pytest.mark.parametrize("upi_id", ["", None, "pilgrim", "pilgrim.okaxis"])
    @pytest.mark.parametrize("package_id,payment_type", [(1, "full"), (999, "initial"), (42, "bogus")])
    async def test_invalid_upi_id_rejected_first(self, service, fake_gateway, upi_id, package_id, payment_type):
        with pytest.raises(InvalidUpiId):
            await service.create_upi_intent(package_id, payment_type, upi_id)
        assert fake_gateway.calls == []

    @pytest.mark.asyncio
    async def test_upi_unknown_package(self, service):
        with pytest.raises(PackageNotFound):
            await service.create_upi_intent(5, "full", "pilgrim@okaxis")
