"""Request rate limiting."""

from doc2code.ratelimit.limiter import (
    DisabledRateLimiter,
    RateLimiter,
    RateLimitResult,
    SlidingWindowRateLimiter,
    create_rate_limiter,
)

__all__ = [
    "RateLimiter",
    "RateLimitResult",
    "SlidingWindowRateLimiter",
    "DisabledRateLimiter",
    "create_rate_limiter",
]
