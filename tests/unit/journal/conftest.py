"""Shared fixtures and trade builders for journal tests."""

import itertools
from datetime import datetime

import pytest

from behavioral_rules.core.config import MiningConfig
from behavioral_rules.core.enums import TradeResult
from behavioral_rules.journal.record import TradeRecord
from behavioral_rules.journal.rule_engine import RuleMiner

_ids = itertools.count(1)

# 2024-01-01 was a Monday
BASE_TIME = datetime(2024, 1, 1, 9, 30, 0)


@pytest.fixture
def base_time():
    return BASE_TIME


@pytest.fixture
def miner():
    return RuleMiner(MiningConfig())


def make_trade(
    result: str | TradeResult = "win",
    r_multiple: float | None = None,
    executed_at: datetime | None = None,
    **attrs,
) -> TradeRecord:
    """Helper to create a TradeRecord with a unique id."""
    return TradeRecord(
        trade_id=f"t{next(_ids)}",
        result=result,
        r_multiple=r_multiple,
        executed_at=executed_at or BASE_TIME,
        **attrs,
    )


def make_trades(
    wins: int,
    losses: int,
    win_r: float = 1.0,
    **attrs,
) -> list[TradeRecord]:
    """Create ``wins`` winners at ``win_r`` followed by ``losses`` losers."""
    return (
        [make_trade("win", r_multiple=win_r, **attrs) for _ in range(wins)]
        + [make_trade("loss", r_multiple=-1.0, **attrs) for _ in range(losses)]
    )
