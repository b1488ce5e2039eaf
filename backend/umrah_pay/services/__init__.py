from umrah_pay.services.catalog import Catalog
from umrah_pay.services.gateway import RazorpayClient
from umrah_pay.services.intent_service import PaymentIntentService
from umrah_pay.services.verification_service import PaymentVerificationService
from umrah_pay.services.failure_recorder import PaymentFailureRecorder

__all__ = ["Catalog", "RazorpayClient", "PaymentIntentService", "PaymentVerificationService", "PaymentFailureRecorder"]
