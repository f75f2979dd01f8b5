from __future__ import annotations
import time

from .errors import AnalysisTimeoutError


class Deadline:
    """Wall-clock budget passed down the analysis call chain.

    Steps bound their own waits by ``remaining_ms()`` and call ``check()``
    between steps, so an expired budget surfaces inside the caller's
    ``with`` blocks and cleanup still runs.
    """

    def __init__(self, timeout_ms: int, clock=time.monotonic):
        self._clock = clock
        self.timeout_ms = int(timeout_ms)
        self._expires_at = clock() + self.timeout_ms / 1000.0

    def remaining_ms(self) -> int:
        return max(0, int((self._expires_at - self._clock()) * 1000))

    def expired(self) -> bool:
        return self.remaining_ms() <= 0

    def bound(self, ms: int) -> int:
        """Clamp a step timeout to what is left of the budget."""
        return max(0, min(int(ms), self.remaining_ms()))

    def check(self, step: str = "") -> None:
        if self.expired():
            where = f" during {step}" if step else ""
            raise AnalysisTimeoutError(f"analysis exceeded {self.timeout_ms}ms{where}")
