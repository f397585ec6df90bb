# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Per-client sliding-window limiter for deploy attempts."""
import time
from collections import deque
from typing import Callable, Deque, Dict, Tuple

SWEEP_EVERY = 256


class SlidingWindowRateLimiter:
    """Allows ``max_requests`` hits per ``window_seconds`` for each key.

    Keys whose window has fully expired are dropped, so memory follows the
    set of recently active clients rather than every client ever seen.
    """

    def __init__(self, max_requests: int, window_seconds: int = 900,
                 clock: Callable[[], float] = time.monotonic):
        self.max_requests = max_requests
        self.window = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._calls = 0

    def __len__(self) -> int:
        return len(self._hits)

    def _expire(self, hits: Deque[float], cutoff: float) -> None:
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _sweep(self, cutoff: float) -> None:
        for key in list(self._hits):
            hits = self._hits[key]
            self._expire(hits, cutoff)
            if not hits:
                del self._hits[key]

    def is_allowed(self, key: str) -> Tuple[bool, int, int]:
        """Returns (allowed, remaining, retry_after_seconds)."""
        now = self._clock()
        cutoff = now - self.window

        self._calls += 1
        if self._calls % SWEEP_EVERY == 0:
            self._sweep(cutoff)

        hits = self._hits.setdefault(key, deque())
        self._expire(hits, cutoff)
        if len(hits) >= self.max_requests:
            # oldest hit leaves the window first
            return False, 0, int(hits[0] - cutoff) + 1
        hits.append(now)
        return True, self.max_requests - len(hits), 0

    def reset(self) -> None:
        self._hits.clear()
        self._calls = 0
