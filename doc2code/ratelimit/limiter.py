"""Per-client request rate limiting.

The limiter variant is chosen explicitly from configuration: a sliding-window
limiter when enabled, a ``DisabledRateLimiter`` that always allows otherwise.
"""

import math
import time
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Optional

from doc2code.config import Config
from doc2code.logger import Logger, session_logger


@dataclass(frozen=True)
class RateLimitResult:
    """Outcome of a rate-limit check.

    ``reset`` is the number of seconds until the client regains a request slot.
    """

    success: bool
    limit: int
    remaining: int
    reset: int

    def headers(self) -> Dict[str, str]:
        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset),
        }


class RateLimiter(ABC):
    @abstractmethod
    def limit(self, key: str) -> RateLimitResult:
        """Record a request for ``key`` and report whether it is allowed."""


class SlidingWindowRateLimiter(RateLimiter):
    """Allows ``max_requests`` per client within any ``window_seconds`` interval."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests <= 0 or window_seconds <= 0:
            raise ValueError("max_requests and window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._requests: Dict[str, Deque[float]] = {}
        self._last_sweep = clock()

    def _evict_idle(self, cutoff: float) -> None:
        """Drop clients whose most recent request has left the window."""
        idle = [key for key, history in self._requests.items() if not history or history[-1] <= cutoff]
        for key in idle:
            del self._requests[key]

    def limit(self, key: str) -> RateLimitResult:
        now = self._clock()
        cutoff = now - self.window_seconds
        # Sweep at most once per window
        if now - self._last_sweep >= self.window_seconds:
            self._evict_idle(cutoff)
            self._last_sweep = now
        history = self._requests.setdefault(key, deque())
        while history and history[0] <= cutoff:
            history.popleft()

        if len(history) >= self.max_requests:
            reset = math.ceil(history[0] + self.window_seconds - now)
            return RateLimitResult(
                success=False, limit=self.max_requests, remaining=0, reset=max(reset, 0)
            )

        history.append(now)
        reset = math.ceil(history[0] + self.window_seconds - now)
        return RateLimitResult(
            success=True,
            limit=self.max_requests,
            remaining=self.max_requests - len(history),
            reset=reset,
        )


class DisabledRateLimiter(RateLimiter):
    """Limiter that never rejects; selected when rate limiting is switched off."""

    def __init__(self, max_requests: int, window_seconds: int):
        self.max_requests = max_requests
        self.window_seconds = window_seconds

    def limit(self, key: str) -> RateLimitResult:
        return RateLimitResult(
            success=True,
            limit=self.max_requests,
            remaining=self.max_requests,
            reset=self.window_seconds,
        )


def create_rate_limiter(
    enabled: Optional[bool] = None,
    max_requests: Optional[int] = None,
    window_seconds: Optional[int] = None,
    logger: Logger = session_logger,
) -> RateLimiter:
    """Build the configured limiter; arguments override the environment."""
    enabled = Config.is_rate_limit_enabled() if enabled is None else enabled
    max_requests = max_requests or Config.get_rate_limit_requests()
    window_seconds = window_seconds or Config.get_rate_limit_window_seconds()

    if not enabled:
        logger.warning("Rate limiting disabled by configuration")
        return DisabledRateLimiter(max_requests, window_seconds)

    logger.info(
        "Rate limiter initialized",
        max_requests=max_requests,
        window_seconds=window_seconds,
    )
    return SlidingWindowRateLimiter(max_requests, window_seconds)
