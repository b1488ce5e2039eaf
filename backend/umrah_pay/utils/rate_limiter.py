"""
Simple memory-based rate limiter for order creation.
Process-local: each uvicorn worker keeps its own counters.
"""
import time
from fastapi import Request, HTTPException
from typing import Dict, Tuple

# {(ip, path): (window_start, count, window)}
_rate_limit_store: Dict[Tuple[str, str], Tuple[float, int, int]] = {}


def reset_rate_limits() -> None:
    _rate_limit_store.clear()


def _sweep_expired(now: float) -> None:
    """Drop counters whose window has closed."""
    expired = [key for key, (start, _, window) in _rate_limit_store.items() if now - start > window]
    for key in expired:
        del _rate_limit_store[key]


def rate_limit(requests: int, window: int):
    """
    Dependency for rate limiting per client IP and path.
    Example: Depends(rate_limit(requests=5, window=60))
    """
    def limiter(request: Request):
        ip = request.client.host if request.client else "unknown"
        key = (ip, request.url.path)
        now = time.time()

        # Expired windows are removed, so this also resets the caller's own window
        _sweep_expired(now)

        if key not in _rate_limit_store:
            _rate_limit_store[key] = (now, 1, window)
            return True

        window_start, count, _ = _rate_limit_store[key]

        if count >= requests:
            raise HTTPException(
                status_code=429,
                detail=f"Rate limit exceeded. Try again in {int(window - (now - window_start))} seconds."
            )

        _rate_limit_store[key] = (window_start, count + 1, window)
        return True

    return limiter
