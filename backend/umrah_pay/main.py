"""
Umrah Tours Payments — FastAPI Application Entry Point

Aggregates the routers, configures CORS and request logging, and maps the
payment error taxonomy onto HTTP responses.
"""
import logging
import os
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from umrah_pay.config import get_settings
from umrah_pay.exceptions import PaymentValidationError
from umrah_pay.logging_config import setup_logging
from umrah_pay.routes import packages_router, payment_router
from umrah_pay.schemas.schemas import HealthResponse
from umrah_pay.utils.cors import ALLOWED_HEADERS, ALLOWED_METHODS, OriginGuardMiddleware, OriginPolicy

settings = get_settings()
logger = logging.getLogger(__name__)

# ─── Application Instance ───────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Payment API for the Umrah Tours storefront. Creates Razorpay orders "
        "(card and UPI), verifies checkout signatures, and serves the package catalog."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# ─── Startup ─────────────────────────────────────────────────────────
BOOT_TIME = time.time()


@app.on_event("startup")
def on_startup():
    """Configure logging and log boot info."""
    log_file = os.path.join(settings.LOG_DIR, "server.log") if settings.LOG_TO_FILE else None
    setup_logging("DEBUG" if settings.DEBUG else "INFO", log_file)

    logger.info(
        "%s v%s starting | RAZORPAY KEY: %s | FRONTEND: %s | DEBUG: %s",
        settings.APP_NAME,
        settings.APP_VERSION,
        "[OK] Loaded" if settings.RAZORPAY_KEY_ID and settings.RAZORPAY_KEY_SECRET else "[!] Missing",
        settings.FRONTEND_URL or "(not set)",
        settings.DEBUG,
    )


# ─── Middleware ──────────────────────────────────────────────────────
origin_policy = OriginPolicy.from_settings(settings)

app.add_middleware(OriginGuardMiddleware, policy=origin_policy)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origin_policy.allow_origins,
    allow_origin_regex=origin_policy.pattern,
    allow_credentials=True,
    allow_methods=ALLOWED_METHODS,
    allow_headers=ALLOWED_HEADERS,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with timing."""
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 1)

    if request.url.path.startswith("/api"):
        logger.info("%s %s -> %s (%sms)", request.method, request.url.path, response.status_code, duration)

    return response


# ─── Exception Handlers ──────────────────────────────────────────────
@app.exception_handler(PaymentValidationError)
async def payment_validation_handler(request: Request, exc: PaymentValidationError):
    """Client-correctable errors: bad payment type, bad UPI id, unknown package."""
    logger.info("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Invalid request",
            "message": "Invalid request",
            "details": jsonable_errors(exc),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


# ─── API Routers ─────────────────────────────────────────────────────
app.include_router(packages_router)
app.include_router(payment_router)


@app.get("/api/health", response_model=HealthResponse, tags=["Health"])
def health():
    """Liveness check."""
    return HealthResponse(
        status="Server is running",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        uptime_seconds=round(time.time() - BOOT_TIME, 1),
    )
