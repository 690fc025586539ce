"""Request Rate Limiter — fixed-window request budget per client, backed by `limits`.

Invariants:
    - One window of `window_seconds` per client key; at most `max_requests` hits pass
    - check() records the hit and reports remaining budget and reset time
    - State is in-process (MemoryStorage): each worker process limits independently
"""

import math
import time
from dataclasses import dataclass

from limits import RateLimitItemPerSecond
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter

_NAMESPACE = "api"


@dataclass(frozen=True)
class RateLimitStatus:
    allowed: bool
    limit: int
    remaining: int
    reset_after: int


class RequestRateLimiter:
    def __init__(self, max_requests: int, window_seconds: int):
        self.item = RateLimitItemPerSecond(max_requests, window_seconds)
        self._storage = MemoryStorage()
        self._strategy = FixedWindowRateLimiter(self._storage)

    def check(self, client_key: str) -> RateLimitStatus:
        allowed = self._strategy.hit(self.item, _NAMESPACE, client_key)
        stats = self._strategy.get_window_stats(self.item, _NAMESPACE, client_key)
        return RateLimitStatus(
            allowed=allowed,
            limit=self.item.amount,
            remaining=max(0, stats.remaining),
            reset_after=max(0, math.ceil(stats.reset_time - time.time())),
        )

    def reset(self) -> None:
        self._storage.reset()
