"""Group closed trades by (dimension, value) and aggregate outcomes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .features import STANDARD_DIMENSIONS, Dimension
from .record import TradeRecord
from .report import FieldGroup

logger = logging.getLogger(__name__)


@dataclass
class _GroupStats:
    """Accumulator for one dimension value."""

    wins: int = 0
    losses: int = 0
    total_r: float = 0.0
    win_r: list[float] = field(default_factory=list)

    @property
    def trades(self) -> int:
        return self.wins + self.losses

    def record(self, trade: TradeRecord) -> None:
        self.total_r += trade.scored_r
        if trade.is_win:
            self.wins += 1
            self.win_r.append(trade.win_r)
        else:
            self.losses += 1

    def freeze(self, field_name: str, value: str) -> FieldGroup:
        avg_win_r = sum(self.win_r) / self.wins if self.wins else 0.0
        return FieldGroup(
            field=field_name,
            value=value,
            wins=self.wins,
            losses=self.losses,
            total_r=self.total_r,
            avg_win_r=avg_win_r,
        )


def group_dimension(
    closed: Sequence[TradeRecord],
    dimension: Dimension,
    *,
    min_sample_size: int = 5,
) -> list[FieldGroup]:
    """Aggregate one dimension.

    Values seen in fewer than ``min_sample_size`` trades are dropped.
    Surviving groups come back in first-seen value order.
    """
    buckets: dict[str, _GroupStats] = {}
    for trade in closed:
        value = dimension(trade)
        if value is None:
            continue
        buckets.setdefault(value, _GroupStats()).record(trade)

    groups = [
        stats.freeze(dimension.name, value)
        for value, stats in buckets.items()
        if stats.trades >= min_sample_size
    ]
    dropped = len(buckets) - len(groups)
    if dropped:
        logger.debug(
            "Dimension %s: dropped %d value(s) below %d trades",
            dimension.name, dropped, min_sample_size,
        )
    return groups


def group_trades(
    closed: Sequence[TradeRecord],
    dimensions: Sequence[Dimension] = STANDARD_DIMENSIONS,
    *,
    min_sample_size: int = 5,
) -> list[FieldGroup]:
    """Aggregate every dimension, in registry order."""
    groups: list[FieldGroup] = []
    for dim in dimensions:
        groups.extend(group_dimension(closed, dim, min_sample_size=min_sample_size))
    return groups
