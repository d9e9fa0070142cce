"""
Per-client request limits for the unauthenticated auth endpoints.

Counters live in process memory on ``app.state.rate_limiter``, so each
worker enforces its own window.
"""

import logging
import time
from typing import Callable, Dict, Optional, Tuple

from fastapi import Request, status

from libs.result import Error
from src.api.error import ClientError

logger = logging.getLogger(__name__)

LOGIN = "login"
REGISTER = "register"
PASSWORD_RESET = "password_reset"


def parse_limit(value: str) -> Tuple[int, float]:
    """'10/900' -> (10, 900.0)"""
    max_requests, window = str(value).split("/", 1)
    return int(max_requests), float(window)


class RateLimiter:
    """Fixed-window counter per (scope, client key)"""

    def __init__(
        self,
        limits: Dict[str, Tuple[int, float]],
        clock: Callable[[], float] = time.monotonic,
    ):
        self.limits = limits
        self.clock = clock
        self._windows: Dict[Tuple[str, str], Tuple[float, int]] = {}

    @classmethod
    def from_config(cls, config) -> Optional["RateLimiter"]:
        if not config.RATE_LIMIT_ENABLED:
            return None
        return cls(
            {
                LOGIN: parse_limit(config.LOGIN_RATE_LIMIT),
                REGISTER: parse_limit(config.REGISTER_RATE_LIMIT),
                PASSWORD_RESET: parse_limit(config.PASSWORD_RESET_RATE_LIMIT),
            }
        )

    def hit(self, scope: str, key: str) -> bool:
        """Count one request; False once the window's allowance is used up"""
        max_requests, window = self.limits.get(scope, (0, 0))
        if max_requests <= 0:
            return True

        now = self.clock()
        started, count = self._windows.get((scope, key), (now, 0))
        if now - started >= window:
            started, count = now, 0

        if count >= max_requests:
            return False

        self._windows[(scope, key)] = (started, count + 1)
        return True


def rate_limit(scope: str):
    """Route dependency enforcing the limiter configured for ``scope``"""

    async def dependency(request: Request) -> None:
        limiter: Optional[RateLimiter] = getattr(request.app.state, "rate_limiter", None)
        if limiter is None:
            return

        client = request.client.host if request.client else "unknown"
        if not limiter.hit(scope, client):
            logger.warning(f"Rate limit '{scope}' exceeded by {client}")
            raise ClientError(
                Error("RATE_LIMITED", "Too many requests, please try again later"),
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            )

    return dependency
