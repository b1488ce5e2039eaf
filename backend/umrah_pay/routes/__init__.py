from umrah_pay.routes.packages import router as packages_router
from umrah_pay.routes.payment import router as payment_router

__all__ = ["packages_router", "payment_router"]
