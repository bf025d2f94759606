from __future__ import annotations

from typing import Callable, Optional

from .rules import drop_interval_ms


class GravityClock:
    """Decides when a loop driver should apply the next gravity tick.

    Timestamps are supplied by the caller (e.g. ``pygame.time.get_ticks()``),
    so the clock itself never reads the wall time.
    """

    def __init__(self, interval_for_level: Callable[[int], int] = drop_interval_ms) -> None:
        self.interval_for_level = interval_for_level
        self.last_tick_ms: Optional[int] = None

    def start(self, now_ms: int) -> None:
        self.last_tick_ms = now_ms

    def due(self, now_ms: int, level: int) -> bool:
        if self.last_tick_ms is None:
            self.last_tick_ms = now_ms
            return False
        return now_ms - self.last_tick_ms >= self.interval_for_level(level)

    def mark(self, now_ms: int) -> None:
        self.last_tick_ms = now_ms
