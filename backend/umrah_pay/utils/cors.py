"""
Cross-origin policy: the configured frontend URL plus Netlify deploy previews.

CORSMiddleware only withholds the CORS headers from foreign origins; the
guard below turns such requests away outright.
"""
import logging
import re
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization", "X-Requested-With"]


class OriginPolicy:
    """Decides whether a request Origin may talk to the API."""

    def __init__(self, frontend_url: str = "", pattern: Optional[str] = None):
        self.frontend_url = frontend_url
        self.pattern = pattern
        self._regex = re.compile(pattern) if pattern else None

    @classmethod
    def from_settings(cls, settings) -> "OriginPolicy":
        return cls(settings.FRONTEND_URL, settings.NETLIFY_ORIGIN_PATTERN)

    @property
    def allow_origins(self) -> list[str]:
        return [self.frontend_url] if self.frontend_url else []

    def is_allowed(self, origin: Optional[str]) -> bool:
        # Same-origin requests, curl and server-to-server calls carry no Origin.
        # An empty header counts as absent.
        if not origin:
            return True
        if self.frontend_url and origin == self.frontend_url:
            return True
        return bool(self._regex and self._regex.fullmatch(origin))


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Rejects requests from origins the policy does not allow."""

    def __init__(self, app, policy: OriginPolicy):
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if not self.policy.is_allowed(origin):
            logger.warning("Rejected request from origin %s to %s", origin, request.url.path)
            return JSONResponse(
                status_code=403,
                content={
                    "success": False,
                    "message": f"CORS not allowed from this origin: {origin}",
                },
            )
        return await call_next(request)
