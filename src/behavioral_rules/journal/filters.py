"""Trade selection ahead of mining.

Both filters keep input order and never copy or alter the records.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from ..core.enums import LookbackWindow
from .record import TradeRecord


def closed_trades(trades: Iterable[TradeRecord]) -> list[TradeRecord]:
    """Return wins and losses only; breakeven and open trades are dropped."""
    return [t for t in trades if t.is_closed]


def within_lookback(
    trades: Iterable[TradeRecord],
    window: LookbackWindow,
    now: datetime,
) -> list[TradeRecord]:
    """Keep trades executed on or after ``now`` minus the window length.

    ``now`` is passed in rather than read from the clock so the same
    inputs always select the same trades.  Naive and aware timestamps are
    compared by treating naive values as UTC.
    """
    days = window.days
    if days is None:
        return list(trades)

    cutoff = _as_utc(now) - timedelta(days=days)
    return [t for t in trades if _as_utc(t.executed_at) >= cutoff]


def latest_execution(trades: Iterable[TradeRecord]) -> datetime:
    """Most recent execution time, as a UTC-aware datetime."""
    return max(_as_utc(t.executed_at) for t in trades)


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts
