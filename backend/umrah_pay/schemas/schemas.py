"""
Pydantic Schemas — Request & Response models for API validation.
Request fields keep the storefront's wire names through aliases.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Compared by identity with catalog ids: "1" does not resolve to package 1.
PackageRef = Union[StrictInt, StrictStr]


# ──────────────── Shared ────────────────

class CustomerInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class PackageOut(BaseModel):
    id: int
    name: str
    price: int
    description: str


# ──────────────── Catalog ────────────────

class PackageListResponse(BaseModel):
    success: bool = True
    packages: List[PackageOut]


class PackageDetailResponse(BaseModel):
    success: bool = True
    package: PackageOut


# ──────────────── Orders ────────────────

class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    package_id: Optional[PackageRef] = Field(None, alias="packageId")
    customer_info: Optional[CustomerInfo] = Field(None, alias="customerInfo")
    payment_type: Optional[str] = Field(None, alias="paymentType", description="full | initial")


class CreateOrderResponse(BaseModel):
    success: bool = True
    order_id: str
    amount: int        # paise, as reported by Razorpay
    currency: str
    package_name: str


class CreateUpiIntentRequest(CreateOrderRequest):
    upi_id: Optional[str] = Field(None, alias="upiId", description="Payer VPA, e.g. name@bank")


class CreateUpiIntentResponse(CreateOrderResponse):
    upi_id: str
    deep_link: str


# ──────────────── Verification ────────────────

class VerifyPaymentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str
    customer_info: Optional[Dict[str, Any]] = Field(None, alias="customerInfo")
    package_id: Optional[PackageRef] = Field(None, alias="packageId")


class VerifyPaymentResponse(BaseModel):
    success: bool
    message: str
    booking_id: Optional[str] = None
    is_free_application: bool = False


# ──────────────── Failures ────────────────

class AckResponse(BaseModel):
    success: bool = True
    message: str


# ──────────────── Generic ────────────────

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    uptime_seconds: float
