"""Baseline statistics every group is compared against."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .record import TradeRecord


@dataclass(frozen=True)
class Baseline:
    """Win rate (percent) and expectancy (R per trade) over all closed trades."""

    total: int
    wins: int
    total_r: float

    @property
    def losses(self) -> int:
        return self.total - self.wins

    @property
    def win_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.wins / self.total * 100

    @property
    def expectancy(self) -> float:
        if self.total == 0:
            return 0.0
        return self.total_r / self.total


def compute_baseline(closed: Sequence[TradeRecord]) -> Baseline:
    """Aggregate the closed trade set.

    Uses :attr:`TradeRecord.scored_r`, so losses count as a flat -1R.
    """
    wins = sum(1 for t in closed if t.is_win)
    total_r = sum(t.scored_r for t in closed)
    return Baseline(total=len(closed), wins=wins, total_r=total_r)
