from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    retry_after: int = 0  # whole seconds, rounded up


class CooldownRateLimiter:
    """One accepted message per session key per cool-down window.

    Entries are never evicted; the map grows with the number of distinct
    session keys seen by the process.
    """

    def __init__(self, cooldown_ms: int = 5000) -> None:
        self.cooldown_ms = cooldown_ms
        self._last_accepted: dict[str, float] = {}
        self._lock = threading.Lock()

    def try_acquire(self, key: str, now_ms: float | None = None) -> RateLimitDecision:
        if now_ms is None:
            now_ms = time.time() * 1000
        with self._lock:
            last = self._last_accepted.get(key)
            if last is not None:
                elapsed = now_ms - last
                if elapsed < self.cooldown_ms:
                    return RateLimitDecision(
                        allowed=False,
                        retry_after=math.ceil((self.cooldown_ms - elapsed) / 1000),
                    )
            self._last_accepted[key] = now_ms
        return RateLimitDecision(allowed=True)

    def __len__(self) -> int:
        return len(self._last_accepted)
