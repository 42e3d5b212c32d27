from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    # Indexed by the number of rows cleared in one lock.
    line_clear_scores: tuple[int, ...] = (0, 40, 100, 300, 1200)
    soft_drop_per_row: int = 1
    hard_drop_per_row: int = 2
    lines_per_level: int = 10
    base_drop_ms: int = 1000
    drop_decay_ms: int = 60
    max_decay_levels: int = 10
    min_drop_ms: int = 300

    def level_for(self, lines_cleared: int) -> int:
        return lines_cleared // self.lines_per_level + 1

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0 or lines >= len(self.line_clear_scores):
            return 0
        return self.line_clear_scores[lines] * level

    def drop_interval_ms(self, level: int) -> int:
        decay = min(level - 1, self.max_decay_levels) * self.drop_decay_ms
        return max(self.base_drop_ms - decay, self.min_drop_ms)
