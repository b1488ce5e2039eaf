"""
Payment Intent Service — turns a package selection into a Razorpay order.

The amount owed is always derived from the catalog; clients never send a price.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from umrah_pay.exceptions import InvalidPaymentType, InvalidUpiId
from umrah_pay.schemas.schemas import CustomerInfo
from umrah_pay.services.catalog import Catalog, Package
from umrah_pay.services.gateway import PaymentGateway
from umrah_pay.utils.validators import build_upi_deep_link, generate_receipt, validate_upi_id

logger = logging.getLogger(__name__)

CURRENCY = "INR"
INITIAL_DEPOSIT_AMOUNT = 10000
# Razorpay takes amounts in paise. Provider convention, not configurable.
MINOR_UNITS_PER_RUPEE = 100

DEFAULT_CUSTOMER_NAME = "Customer"
DEFAULT_CUSTOMER_EMAIL = "customer@example.com"
DEFAULT_CUSTOMER_PHONE = "9999999999"


class PaymentType(str, Enum):
    FULL = "full"
    INITIAL = "initial"


@dataclass(frozen=True)
class OrderReceipt:
    order_id: str
    amount: int  # as reported by the gateway, in paise
    currency: str
    package_name: str


@dataclass(frozen=True)
class UpiOrderReceipt(OrderReceipt):
    upi_id: str = ""
    deep_link: str = ""


def compute_amount(package: Package, payment_type: Any) -> int:
    """Amount owed in rupees: the package price for ``full``, the fixed deposit for ``initial``."""
    try:
        kind = PaymentType(payment_type)
    except ValueError:
        raise InvalidPaymentType(payment_type)
    if kind is PaymentType.FULL:
        return package.price
    return INITIAL_DEPOSIT_AMOUNT


def to_minor_units(amount: int) -> int:
    return amount * MINOR_UNITS_PER_RUPEE


def build_order_notes(
    package: Package,
    customer: Optional[CustomerInfo],
    payment_type: str,
) -> Dict[str, str]:
    customer = customer or CustomerInfo()
    return {
        "package_name": package.name,
        "customer_name": customer.name or DEFAULT_CUSTOMER_NAME,
        "customer_email": customer.email or DEFAULT_CUSTOMER_EMAIL,
        "customer_phone": customer.phone or DEFAULT_CUSTOMER_PHONE,
        "payment_type": payment_type,
    }


class PaymentIntentService:
    """Creates gateway orders for catalog packages."""

    def __init__(self, catalog: Catalog, gateway: PaymentGateway):
        self.catalog = catalog
        self.gateway = gateway

    async def create_intent(
        self,
        package_id: Union[int, str],
        payment_type: str,
        customer: Optional[CustomerInfo] = None,
    ) -> OrderReceipt:
        """Create a card/netbanking order.

        Raises:
            PackageNotFound: unknown package id.
            InvalidPaymentType: payment type other than ``full`` or ``initial``.
            GatewayError: Razorpay refused or could not be reached.
        """
        package = self.catalog.get_by_id(package_id)
        amount = compute_amount(package, payment_type)
        options = {
            "amount": to_minor_units(amount),
            "currency": CURRENCY,
            "receipt": generate_receipt(package_id),
            "notes": build_order_notes(package, customer, payment_type),
        }

        order = await self.gateway.create_order(options)
        logger.info(
            "Created order %s for package %s (%s, receipt %s)",
            order.get("id"), package_id, payment_type, options["receipt"],
        )
        return OrderReceipt(
            order_id=order["id"],
            amount=order["amount"],
            currency=order["currency"],
            package_name=package.name,
        )

    async def create_upi_intent(
        self,
        package_id: Union[int, str],
        payment_type: str,
        upi_id: Optional[str],
        customer: Optional[CustomerInfo] = None,
    ) -> UpiOrderReceipt:
        """Create an order tagged for UPI and return an advisory ``upi://`` deep link.

        Raises:
            InvalidUpiId: ``upi_id`` is empty or lacks ``@``. Checked first.
            PackageNotFound, InvalidPaymentType, GatewayError: as for create_intent.
        """
        if not validate_upi_id(upi_id):
            raise InvalidUpiId(upi_id)

        package = self.catalog.get_by_id(package_id)
        amount = compute_amount(package, payment_type)
        notes = build_order_notes(package, customer, payment_type)
        notes["upi_id"] = upi_id
        notes["payment_method"] = "upi"
        options = {
            "amount": to_minor_units(amount),
            "currency": CURRENCY,
            "receipt": generate_receipt(package_id, prefix="umrah_upi"),
            "notes": notes,
        }

        order = await self.gateway.create_order(options)
        logger.info(
            "Created UPI order %s for package %s (%s, receipt %s)",
            order.get("id"), package_id, payment_type, options["receipt"],
        )
        return UpiOrderReceipt(
            order_id=order["id"],
            amount=order["amount"],
            currency=order["currency"],
            package_name=package.name,
            upi_id=upi_id,
            deep_link=build_upi_deep_link(upi_id, amount, CURRENCY),
        )
