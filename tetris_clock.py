
"""Headless tick clock: re-arming always cancels the previous timer first"""
from typing import Callable, Optional


class ManualTicker:
    """Headless ticker: time only passes through advance()."""

    def __init__(self, callback: Optional[Callable[[], None]] = None):
        self.callback = callback
        self.interval_ms: Optional[int] = None
        self.elapsed_ms = 0
        self.arm_count = 0

    @property
    def active(self) -> bool:
        return self.interval_ms is not None

    def start(self, interval_ms: int):
        self.stop()
        self.interval_ms = interval_ms
        self.arm_count += 1

    def stop(self):
        self.interval_ms = None
        self.elapsed_ms = 0

    def advance(self, ms: int) -> int:
        """Let `ms` pass and fire the callback once per elapsed interval."""
        fired = 0
        self.elapsed_ms += ms
        while self.interval_ms is not None and self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms -= self.interval_ms
            fired += 1
            if self.callback:
                self.callback()
        if self.interval_ms is None:
            self.elapsed_ms = 0
        return fired

