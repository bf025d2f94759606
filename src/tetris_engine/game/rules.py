from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (100, 300, 500, 800)
    lines_per_level: int = 10
    base_interval_ms: int = 1000
    interval_step_ms: int = 100
    min_interval_ms: int = 100

    def score_for_lines(self, lines: int, level: int = 1) -> int:
        # Only 1..4 simultaneous rows are reachable; anything else scores nothing.
        if not 1 <= lines <= len(self.line_clear_scores):
            return 0
        return self.line_clear_scores[lines - 1] * level

    def level_for_lines(self, total_lines: int) -> int:
        return max(0, total_lines) // self.lines_per_level + 1

    def drop_interval_ms(self, level: int) -> int:
        level = max(1, level)
        interval = self.base_interval_ms - (level - 1) * self.interval_step_ms
        return max(self.min_interval_ms, interval)


DEFAULT_RULES = ScoringRules()


def score_for(lines: int, level: int) -> int:
    """Points for clearing ``lines`` rows at once on ``level``."""
    return DEFAULT_RULES.score_for_lines(lines, level)


def level_for_lines(total_lines: int) -> int:
    return DEFAULT_RULES.level_for_lines(total_lines)


def drop_interval_ms(level: int) -> int:
    """Gravity interval for ``level``: 1000 ms, minus 100 ms per level, floored at 100 ms."""
    return DEFAULT_RULES.drop_interval_ms(level)
